from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

# Ensure repo root is on sys.path and is the working directory.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
os.chdir(ROOT)

from portfolio_analytics.config import SnapshotPaths, settings
from portfolio_analytics.pipeline.snapshot_store import HOLDINGS, TIMELINE, SnapshotError, SnapshotStore
from portfolio_analytics.pipeline.validation import validate_holdings_snapshot, validate_timeline_snapshot

VALIDATORS = {
    HOLDINGS: validate_holdings_snapshot,
    TIMELINE: validate_timeline_snapshot,
}


def main():
    parser = argparse.ArgumentParser(description="Validate the holdings and timeline snapshot files.")
    parser.add_argument("--holdings", default=settings.holdings_snapshot_path)
    parser.add_argument("--timeline", default=settings.timeline_snapshot_path)
    args = parser.parse_args()

    store = SnapshotStore(SnapshotPaths(holdings=args.holdings, timeline=args.timeline))
    errors: list[str] = []
    for name, validate in VALIDATORS.items():
        try:
            data = store.read(name)
        except SnapshotError as e:
            errors.append(str(e))
            continue
        ok, reasons = validate(data)
        if not ok:
            errors.extend([f"{name}: {r}" for r in reasons])

    if errors:
        print("snapshot validation: FAIL")
        for msg in errors:
            print(f"ERROR: {msg}")
        raise SystemExit(2)
    print("snapshot validation: OK")


if __name__ == "__main__":
    main()
