from collections.abc import Mapping
from typing import Tuple, List

from ..utils import is_number, parse_date
from .normalize import FIELD_KEYS, resolve_field
from .returns import ASSETS


def validate_holdings_snapshot(data) -> Tuple[bool, List[str]]:
    reasons = []
    if not isinstance(data, list):
        return False, ["holdings is not a list"]
    symbol_keys = FIELD_KEYS["symbol"][0]
    for idx, item in enumerate(data):
        if not isinstance(item, Mapping):
            reasons.append(f"holdings[{idx}] is not an object")
            continue
        if resolve_field(item, symbol_keys) is None:
            reasons.append(f"holdings[{idx}] missing symbol")
    return (len(reasons) == 0), reasons


def validate_timeline_snapshot(data) -> Tuple[bool, List[str]]:
    reasons = []
    if not isinstance(data, list):
        return False, ["timeline is not a list"]
    seen = set()
    for idx, point in enumerate(data):
        if not isinstance(point, Mapping):
            reasons.append(f"timeline[{idx}] is not an object")
            continue
        on = parse_date(point.get("date"))
        if on is None:
            reasons.append(f"timeline[{idx}] missing or invalid date")
        elif on in seen:
            reasons.append(f"timeline[{idx}] duplicate date {on.isoformat()}")
        else:
            seen.add(on)
        for asset in ASSETS:
            if not is_number(point.get(asset)):
                reasons.append(f"timeline[{idx}].{asset} is not a number")
    return (len(reasons) == 0), reasons
