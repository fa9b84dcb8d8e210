"""Entry points for ranking an organization's contributors across its repositories."""

from __future__ import annotations

import argparse
import json
import sys
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import List, Optional, Sequence

from org_contributors.retrieval.collectors import list_contributors, list_repositories
from org_contributors.retrieval.config import MAX_WORKERS
from org_contributors.retrieval.errors import Result
from org_contributors.retrieval.models import Repository

from .aggregation import merge_contributors
from .responses import to_error_response

EXECUTOR = ThreadPoolExecutor(max_workers=MAX_WORKERS, thread_name_prefix="contributors")
# One slot per worker; submitters wait here instead of queueing without bound.
WORKER_SLOTS = threading.BoundedSemaphore(MAX_WORKERS)


def _submit(org: str, repo_name: str) -> Future:
    WORKER_SLOTS.acquire()
    try:
        future = EXECUTOR.submit(list_contributors, org, repo_name)
    except BaseException:
        WORKER_SLOTS.release()
        raise
    future.add_done_callback(lambda _: WORKER_SLOTS.release())
    return future


def fetch_contributors_concurrently(org: str, repositories: Sequence[Repository]) -> List[Result]:
    """Fetch every repository's contributors on the shared pool and wait for all of them.

    Outcomes come back in the same order as `repositories`, whatever order the
    requests finish in. A failure does not cancel requests already dispatched.
    """
    futures = [_submit(org, repository.name) for repository in repositories]
    return [future.result() for future in futures]


def get_contributors_by_organization(org: str) -> Result:
    """Return Ok(ranked ContributorTotal list) for `org`, or the first Err encountered."""
    repositories = list_repositories(org)
    if repositories.is_err():
        return repositories
    outcomes = fetch_contributors_concurrently(org, repositories.value)
    return merge_contributors(outcomes)


def build_arg_parser() -> argparse.ArgumentParser:
    """Return the CLI parser used by the contributor ranking entry point."""

    parser = argparse.ArgumentParser(
        description="Rank the contributors of every repository in a GitHub organization.",
    )
    parser.add_argument("organization")
    parser.add_argument("--json", action="store_true", help="print the ranking as a JSON array")
    parser.add_argument("--top", type=int, default=0, help="only print the first N entries (0 = all)")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point; exits with status 1 when the ranking cannot be produced."""
    args = build_arg_parser().parse_args(argv)
    org = args.organization

    print(f"\n=== {org} ===", file=sys.stderr)
    print("  fetching repositories and contributors...", file=sys.stderr)
    result = get_contributors_by_organization(org)
    if result.is_err():
        response = to_error_response(result.error)
        print(f"[error] {response.status} {response.message}")
        sys.exit(1)

    totals = result.value
    if args.top > 0:
        totals = totals[: args.top]

    if args.json:
        print(json.dumps([total.to_dict() for total in totals], indent=2, ensure_ascii=False))
    else:
        for total in totals:
            print(f"{total.login}\t{total.contributions}")
    print(f"    DONE: {len(result.value)} contributors", file=sys.stderr)


__all__ = [
    "EXECUTOR",
    "WORKER_SLOTS",
    "fetch_contributors_concurrently",
    "get_contributors_by_organization",
    "build_arg_parser",
    "main",
]


if __name__ == "__main__":
    main()
