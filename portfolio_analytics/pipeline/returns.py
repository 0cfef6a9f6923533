from __future__ import annotations

import math
from collections.abc import Mapping
from datetime import date

from ..utils import day_distance, is_number, parse_date, round_2, shift_months

ASSETS = ("portfolio", "nifty50", "gold")

# window name -> calendar months to look back from the latest point
WINDOWS = (
    ("1month", 1),
    ("3months", 3),
    ("1year", 12),
)


def empty_returns() -> dict:
    return {asset: {window: 0 for window, _ in WINDOWS} for asset in ASSETS}


def dated_points(timeline) -> list[tuple[date, Mapping]]:
    """Return (date, point) pairs for points with a readable date, oldest first."""
    if not isinstance(timeline, list):
        return []
    out = []
    for point in timeline:
        if not isinstance(point, Mapping):
            continue
        on = parse_date(point.get("date"))
        if on is None:
            continue
        out.append((on, point))
    out.sort(key=lambda item: item[0])
    return out


def window_targets(latest: date) -> dict[str, date]:
    return {window: shift_months(latest, -months) for window, months in WINDOWS}


def find_closest_point(points: list[tuple[date, Mapping]], target: date):
    # Linear scan; the first point wins a tie.
    closest = None
    best = None
    for on, point in points:
        diff = day_distance(on, target)
        if best is None or diff < best:
            best = diff
            closest = point
    return closest


def calculate_return(current, previous) -> float:
    if not is_number(current) or not is_number(previous):
        return 0
    if not math.isfinite(current) or not math.isfinite(previous):
        return 0
    if not current or not previous:
        return 0
    return round_2((current - previous) * 100 / previous)


def compute_returns(timeline) -> dict:
    """Trailing 1 month, 3 month and 1 year returns per asset.

    The newest dated point is the reference. Each window compares it with the
    point closest to the reference date shifted back by whole calendar months.
    Any window without usable data reports 0.
    """
    points = dated_points(timeline)
    if not points:
        return empty_returns()
    latest_date, latest = points[-1]
    anchors = {
        window: find_closest_point(points, target)
        for window, target in window_targets(latest_date).items()
    }
    out = {}
    for asset in ASSETS:
        out[asset] = {}
        for window, _ in WINDOWS:
            anchor = anchors[window]
            previous = anchor.get(asset) if anchor is not None else None
            out[asset][window] = calculate_return(latest.get(asset), previous)
    return out
