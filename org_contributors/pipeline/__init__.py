"""Concurrent fan-out over repositories and organization-wide contributor ranking."""

from .runner import get_contributors_by_organization, main

__all__ = ["get_contributors_by_organization", "main"]
