"""Collectors for an organization's repositories and each repository's contributors."""

from __future__ import annotations

from urllib.parse import quote

from .config import CONTRIBUTORS_URL, REPOS_URL
from .errors import Err, IllegalArgumentError, Result
from .http_client import collect_all
from .models import contributor_from_json, repository_from_json


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _escape(segment: str) -> str:
    return quote(segment, safe="")


def list_repositories(org: str) -> Result:
    """Return Ok(list of Repository) for every repository of `org`."""
    if _is_blank(org):
        return Err(IllegalArgumentError("Organization name cannot be blank."))
    url = REPOS_URL.format(org=_escape(org))
    return collect_all(url, repository_from_json)


def list_contributors(owner: str, repo: str) -> Result:
    """Return Ok(list of Contributor) for `owner/repo`; an empty repository yields Ok([])."""
    if _is_blank(owner) or _is_blank(repo):
        return Err(IllegalArgumentError("Owner and repository names cannot be blank."))
    url = CONTRIBUTORS_URL.format(owner=_escape(owner), repo=_escape(repo))
    return collect_all(url, contributor_from_json)


__all__ = ["list_repositories", "list_contributors"]
