"""Convenience shim to rank contributors of one organization: `python run_pipeline.py ORG`."""

from __future__ import annotations

from org_contributors.pipeline.runner import main as run_pipeline


if __name__ == "__main__":
    run_pipeline()
