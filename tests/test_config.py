"""Tests for org_contributors.retrieval.config ensuring env overrides and defaults work.

Run with coverage to validate configuration handling:
    pytest tests/test_config.py --maxfail=1 -v --cov=org_contributors.retrieval.config --cov-report=term-missing
"""

from importlib import reload

import org_contributors.retrieval.config as config


def test_config_defaults_are_present():
    assert config.BASE_URL.startswith("https://")
    assert config.ACCEPT_HEADER == "application/vnd.github.v3+json"
    assert config.MAX_WORKERS >= 1
    assert config.REQUEST_TIMEOUT > 0
    assert config.USER_AGENT.startswith("org-contributors")


def test_url_templates_use_base_url():
    assert config.REPOS_URL.format(org="acme") == f"{config.BASE_URL}/orgs/acme/repos"
    assert config.CONTRIBUTORS_URL.format(owner="acme", repo="rocket") == (
        f"{config.BASE_URL}/repos/acme/rocket/contributors"
    )


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("MAX_WORKERS", "4")
    monkeypatch.setenv("PER_PAGE", "0")
    monkeypatch.setenv("ORG_CONTRIBUTORS_BASE_URL", "http://localhost:8080/")
    reloaded = reload(config)
    try:
        assert reloaded.MAX_WORKERS == 4
        assert reloaded.PER_PAGE == 0
        assert reloaded.REPOS_URL == "http://localhost:8080/orgs/{org}/repos"
    finally:
        monkeypatch.delenv("MAX_WORKERS", raising=False)
        monkeypatch.delenv("PER_PAGE", raising=False)
        monkeypatch.delenv("ORG_CONTRIBUTORS_BASE_URL", raising=False)
        reload(config)


def test_max_workers_never_below_one(monkeypatch):
    monkeypatch.setenv("MAX_WORKERS", "0")
    try:
        assert reload(config).MAX_WORKERS == 1
    finally:
        monkeypatch.delenv("MAX_WORKERS", raising=False)
        reload(config)
