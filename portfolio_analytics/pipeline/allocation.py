from __future__ import annotations

from collections.abc import Mapping

from ..utils import coerce_float, round_2, round_half_up

# Wire names accepted in place of the Holding attribute names.
_KEY_ALIASES = {
    "marketCap": "market_cap",
}


def _lookup(holding, key: str):
    if isinstance(holding, Mapping):
        if key in holding:
            return holding.get(key)
        for wire, attr in _KEY_ALIASES.items():
            if key == attr:
                return holding.get(wire)
        return None
    return getattr(holding, _KEY_ALIASES.get(key, key), None)


def allocation_by_key(holdings, key: str) -> dict:
    """Group holdings by `key` and return value and share of total per group.

    Holdings with an empty label or a value that is missing, unparseable or
    not positive are left out of both the groups and the total. An empty dict
    means nothing qualified.
    """
    if not holdings:
        return {}
    grouped: dict = {}
    total = 0.0
    for holding in holdings:
        if holding is None:
            continue
        label = _lookup(holding, key)
        value = coerce_float(_lookup(holding, "value"))
        if not label or value is None or value <= 0:
            continue
        if not isinstance(label, str):
            label = str(label)
        grouped[label] = grouped.get(label, 0.0) + value
        total += value
    if total == 0:
        return {}
    return {
        label: {
            "value": round_half_up(value),
            "percentage": round_2(value * 100 / total),
        }
        for label, value in grouped.items()
    }
