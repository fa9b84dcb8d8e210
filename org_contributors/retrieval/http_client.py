"""HTTP helpers for fetching GitHub list pages and following their Link-header cursors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional

import requests

from .config import ACCEPT_HEADER, PER_PAGE, REQUEST_TIMEOUT, USER_AGENT
from .errors import ApiCallError, Err, NotFoundError, Ok, Result

SESSION = requests.Session()
SESSION.headers.update(
    {
        "Accept": ACCEPT_HEADER,
        "User-Agent": USER_AGENT,
    }
)

LINK_HEADER = "Link"
LINK_RELATIONS = ("first", "last", "prev", "next")

Decoder = Callable[[Dict[str, Any]], Any]


@dataclass(frozen=True)
class Page:
    """Decoded records of one response plus the URL of the following page, if any."""

    records: List[Any]
    next_url: Optional[str] = None


@dataclass
class PageLinks:
    first: Optional[str] = None
    last: Optional[str] = None
    prev: Optional[str] = None
    next: Optional[str] = None


def parse_link_header(header: Optional[str]) -> PageLinks:
    """Parse a `Link` header value into its first/last/prev/next URLs.

    Entries look like `<https://...>; rel="next"`. Anything that does not fit
    that shape is skipped rather than reported, so a malformed header only
    means fewer known pages.
    """
    links = PageLinks()
    if not header:
        return links

    for entry in header.split(","):
        segments = entry.split(";")
        if len(segments) < 2:
            continue

        url = segments[0].strip()
        if not (url.startswith("<") and url.endswith(">")):
            continue
        url = url[1:-1]

        for param in segments[1:]:
            parts = param.strip().split("=")
            if len(parts) < 2 or parts[0].strip() != "rel":
                continue
            rel = parts[1].strip()
            if len(rel) >= 2 and rel.startswith('"') and rel.endswith('"'):
                rel = rel[1:-1]
            if rel in LINK_RELATIONS:
                setattr(links, rel, url)
    return links


def next_page_link(headers: Optional[Mapping[str, str]]) -> Optional[str]:
    """Return the `rel="next"` URL from response headers, or None on the last page."""
    return parse_link_header((headers or {}).get(LINK_HEADER)).next


def log_http_error(resp: requests.Response, url: str) -> None:
    """Print a short, human-readable message when GitHub returns an error."""
    try:
        body = resp.json()
    except Exception:
        body = {"text": (resp.text or "")[:300]}
    if not isinstance(body, dict):
        body = {"text": str(body)[:300]}
    msg = body.get("message") or body.get("error") or body.get("text")
    print(f"[error] HTTP {resp.status_code} for {url}\n  -> {msg}")


def with_per_page(url: str, per_page: int = PER_PAGE) -> str:
    """Append the configured page size to a first-page URL."""
    if not per_page:
        return url
    sep = "&" if "?" in url else "?"
    return f"{url}{sep}per_page={per_page}"


def fetch_page(url: str, decode: Decoder) -> Result:
    """GET one page and decode its JSON list body with `decode`.

    Returns Ok(Page) on success, Err(NotFoundError) for 404 and
    Err(ApiCallError) for any other failure. Never raises.
    """
    try:
        resp = SESSION.get(url, timeout=REQUEST_TIMEOUT)
    except requests.RequestException as exc:
        print(f"[error] HTTP call failed for {url}: {exc}")
        return Err(ApiCallError())

    if resp.status_code == 404:
        return Err(NotFoundError())

    if not 200 <= resp.status_code < 300:
        log_http_error(resp, url)
        return Err(ApiCallError())

    if resp.status_code == 204:
        return Ok(Page(records=[]))

    if not resp.content:
        print(f"[error] GitHub responded with empty body for {url} (HTTP {resp.status_code})")
        return Err(ApiCallError())

    try:
        payload = resp.json()
    except ValueError as exc:
        print(f"[error] invalid JSON from {url}: {exc}")
        return Err(ApiCallError())

    if not isinstance(payload, list):
        print(f"[error] expected a JSON list from {url}, got {type(payload).__name__}")
        return Err(ApiCallError())

    try:
        records = [decode(entry) for entry in payload]
    except (KeyError, TypeError, ValueError) as exc:
        print(f"[error] unexpected record shape from {url}: {exc!r}")
        return Err(ApiCallError())

    return Ok(Page(records=records, next_url=next_page_link(resp.headers)))


def collect_all(start_url: str, decode: Decoder) -> Result:
    """Follow `next` links from `start_url` until exhausted, concatenating records.

    The first failing page aborts the walk; records from earlier pages are dropped.
    """
    records: List[Any] = []
    url: Optional[str] = with_per_page(start_url)
    while url:
        result = fetch_page(url, decode)
        if result.is_err():
            return result
        page = result.value
        records.extend(page.records)
        url = page.next_url
    return Ok(records)


__all__ = [
    "SESSION",
    "Page",
    "PageLinks",
    "parse_link_header",
    "next_page_link",
    "log_http_error",
    "with_per_page",
    "fetch_page",
    "collect_all",
]
