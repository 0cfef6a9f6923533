from __future__ import annotations

import argparse
import asyncio
import json
import os
import sys
from pathlib import Path

# Ensure repo root is on sys.path and is the working directory.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
os.chdir(ROOT)

from portfolio_analytics.config import AnalyticsConfig, SnapshotPaths, settings
from portfolio_analytics.logging import setup_logging
from portfolio_analytics.services.analytics import PortfolioAnalytics

QUERIES = ("holdings", "allocation", "performance", "summary", "dashboard")


def _parse_args():
    parser = argparse.ArgumentParser(description="Print portfolio analytics computed from the snapshot files.")
    parser.add_argument("query", nargs="?", default="dashboard", choices=QUERIES)
    parser.add_argument("--holdings", default=settings.holdings_snapshot_path, help="Holdings snapshot path")
    parser.add_argument("--timeline", default=settings.timeline_snapshot_path, help="Timeline snapshot path")
    parser.add_argument("--indent", type=int, default=2)
    parser.add_argument("--log-level", default=None, help="Override ANALYTICS_LOG_LEVEL / LOG_LEVEL")
    return parser.parse_args()


async def _run(query: str, analytics: PortfolioAnalytics):
    return await getattr(analytics, f"get_{query}")()


def main():
    args = _parse_args()
    setup_logging(args.log_level)
    config = AnalyticsConfig(snapshot_paths=SnapshotPaths(holdings=args.holdings, timeline=args.timeline))
    envelope = asyncio.run(_run(args.query, PortfolioAnalytics(config)))
    print(json.dumps(envelope.payload, indent=args.indent, ensure_ascii=False))
    if not envelope.ok:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
