from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

import structlog

from ..utils import coerce_float, coerce_int

log = structlog.get_logger()


@dataclass(frozen=True)
class Holding:
    symbol: str = ""
    name: str = ""
    quantity: int = 0
    avg_price: float = 0.0
    current_price: float = 0.0
    sector: str = ""
    market_cap: str = ""
    value: float = 0.0
    gain_loss: float = 0.0
    gain_loss_percent: float = 0.0

    def to_dict(self) -> dict:
        return {
            "symbol": self.symbol,
            "name": self.name,
            "quantity": self.quantity,
            "avgPrice": self.avg_price,
            "currentPrice": self.current_price,
            "sector": self.sector,
            "marketCap": self.market_cap,
            "value": self.value,
            "gainLoss": self.gain_loss,
            "gainLossPercent": self.gain_loss_percent,
        }


def _text(val):
    return str(val).strip()


def _float(val):
    num = coerce_float(val)
    return 0.0 if num is None else num


def _int(val):
    num = coerce_int(val)
    return 0 if num is None else num


def _percent(val):
    num = coerce_float(val, strip_suffix="%")
    return 0.0 if num is None else num


# field -> (candidate keys in lookup order, parser, default)
FIELD_KEYS = {
    "symbol": (("Symbol", "symbol"), _text, ""),
    "name": (("Company Name", "name"), _text, ""),
    "quantity": (("Quantity", "quantity"), _int, 0),
    "avg_price": (("Avg Price ₹", "avgPrice"), _float, 0.0),
    "current_price": (("Current Price (₹)", "currentPrice"), _float, 0.0),
    "sector": (("Sector", "sector"), _text, ""),
    "market_cap": (("Market Cap", "marketCap"), _text, ""),
    "value": (("Value ₹", "value"), _float, 0.0),
    "gain_loss": (("Gain/Loss (₹)", "gainLoss"), _float, 0.0),
    "gain_loss_percent": (("Gain/Loss %", "gainLossPercent"), _percent, 0.0),
}


def _present(val) -> bool:
    if val is None:
        return False
    if isinstance(val, str) and not val.strip():
        return False
    return True


def resolve_field(item: Mapping, keys):
    for key in keys:
        val = item.get(key)
        if _present(val):
            return val
    return None


def to_holding(item: Mapping) -> Holding:
    fields = {}
    for field, (keys, parse, default) in FIELD_KEYS.items():
        raw = resolve_field(item, keys)
        fields[field] = default if raw is None else parse(raw)
    return Holding(**fields)


def normalize_holdings(raw_items) -> list[Holding]:
    """Map raw holding records onto `Holding`.

    Entries that are not mappings are dropped. A record that fails to build
    is logged and skipped; it never aborts the rest of the batch.
    """
    if not isinstance(raw_items, list):
        return []
    out = []
    for idx, item in enumerate(raw_items):
        if not isinstance(item, Mapping):
            continue
        try:
            out.append(to_holding(item))
        except Exception as e:
            log.warning("holding_normalize_failed", index=idx, err=str(e))
    return out
