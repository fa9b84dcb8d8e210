"""Merge per-repository contributor lists into one organization-wide ranking."""

from __future__ import annotations

from collections import Counter
from typing import Dict, Iterable, List

from org_contributors.retrieval.errors import Ok, Result
from org_contributors.retrieval.models import Contributor, ContributorTotal


def sum_contributions(contributors: Iterable[Contributor]) -> Dict[str, int]:
    """Total contributions per login."""
    totals: Counter = Counter()
    for contributor in contributors:
        totals[contributor.login] += contributor.contributions
    return dict(totals)


def rank_totals(totals: Dict[str, int]) -> List[ContributorTotal]:
    """Sort by contributions descending; equal totals fall back to login ascending."""
    ordered = sorted(totals.items(), key=lambda item: (-item[1], item[0]))
    return [ContributorTotal(login=login, contributions=count) for login, count in ordered]


def merge_contributors(per_repository: Iterable[Result]) -> Result:
    """Return the first Err in join order, otherwise Ok(ranked ContributorTotal list)."""
    outcomes = list(per_repository)
    for outcome in outcomes:
        if outcome.is_err():
            return outcome

    flattened = (contributor for outcome in outcomes for contributor in outcome.value)
    return Ok(rank_totals(sum_contributions(flattened)))


__all__ = ["sum_contributions", "rank_totals", "merge_contributors"]
