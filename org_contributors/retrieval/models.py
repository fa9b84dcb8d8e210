"""Immutable records decoded from GitHub list payloads."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Repository:
    name: str


@dataclass(frozen=True)
class Contributor:
    """One login's contribution count within a single repository."""

    login: str
    contributions: int


@dataclass(frozen=True)
class ContributorTotal:
    """One login's contributions summed across every repository of an organization."""

    login: str
    contributions: int

    def to_dict(self) -> Dict[str, Any]:
        return {"login": self.login, "contributions": self.contributions}


def repository_from_json(entry: Dict[str, Any]) -> Repository:
    """Keep only the repository name; raises KeyError/TypeError on unexpected shapes."""
    name = entry["name"]
    if not isinstance(name, str):
        raise TypeError(f"repository name must be a string, got {type(name).__name__}")
    return Repository(name=name)


def contributor_from_json(entry: Dict[str, Any]) -> Contributor:
    """Decode a contributor entry, rejecting non-integer or negative counts."""
    login = entry["login"]
    contributions = entry["contributions"]
    if not isinstance(login, str):
        raise TypeError(f"contributor login must be a string, got {type(login).__name__}")
    if isinstance(contributions, bool) or not isinstance(contributions, int):
        raise TypeError(f"contributions must be an integer, got {contributions!r}")
    if contributions < 0:
        raise ValueError(f"contributions cannot be negative, got {contributions}")
    return Contributor(login=login, contributions=contributions)


__all__ = [
    "Repository",
    "Contributor",
    "ContributorTotal",
    "repository_from_json",
    "contributor_from_json",
]
