"""Central configuration constants for the contributor retrieval workflow."""

from __future__ import annotations

import os

USER_AGENT = "org-contributors/1.0"
ACCEPT_HEADER = "application/vnd.github.v3+json"
BASE_URL = os.getenv("ORG_CONTRIBUTORS_BASE_URL", "https://api.github.com").rstrip("/")
REPOS_URL = BASE_URL + "/orgs/{org}/repos"
CONTRIBUTORS_URL = BASE_URL + "/repos/{owner}/{repo}/contributors"
REQUEST_TIMEOUT = int(os.getenv("REQUEST_TIMEOUT", "30"))
PER_PAGE = int(os.getenv("PER_PAGE", "100"))  # 0 = API default
MAX_WORKERS = max(1, int(os.getenv("MAX_WORKERS", "32")))

__all__ = [
    "USER_AGENT",
    "ACCEPT_HEADER",
    "BASE_URL",
    "REPOS_URL",
    "CONTRIBUTORS_URL",
    "REQUEST_TIMEOUT",
    "PER_PAGE",
    "MAX_WORKERS",
]
