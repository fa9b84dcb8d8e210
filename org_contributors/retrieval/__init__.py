"""Paginated GitHub REST retrieval: page fetching, cursor following, and collectors."""

from .collectors import list_contributors, list_repositories

__all__ = ["list_contributors", "list_repositories"]
