import math
from decimal import ROUND_HALF_UP, Decimal
from datetime import date, timedelta
from dateutil.parser import isoparse

# Characters that show up inside numbers exported from broker statements.
_NUMERIC_NOISE = str.maketrans("", "", ",₹$ \u00a0")


def is_number(val) -> bool:
    return isinstance(val, (int, float)) and not isinstance(val, bool)


def coerce_float(val, strip_suffix: str | None = None):
    """Parse a loosely-typed number. Returns None when the value cannot be read."""
    if val is None or isinstance(val, bool):
        return None
    if isinstance(val, (int, float)):
        num = float(val)
    elif isinstance(val, str):
        text = val.strip()
        if strip_suffix and text.endswith(strip_suffix):
            text = text[: -len(strip_suffix)]
        text = text.translate(_NUMERIC_NOISE)
        if not text:
            return None
        try:
            num = float(text)
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(num):
        return None
    return num


def coerce_int(val):
    num = coerce_float(val)
    if num is None:
        return None
    return int(num)


def round_half_up(val: float) -> int:
    return int(math.floor(val + 0.5))


def round_2(val: float) -> float:
    """Two decimal places, exact ties rounded away from zero."""
    return float(Decimal(repr(val)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def parse_date(val) -> date | None:
    if not isinstance(val, str):
        return None
    text = val.strip()
    if not text:
        return None
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return isoparse(text).date()
    except (ValueError, OverflowError):
        return None


def shift_months(on: date, months: int) -> date:
    """Move `on` by a number of calendar months.

    A day that does not exist in the target month rolls forward into the
    following month (2024-03-31 minus one month is 2024-03-02).
    """
    index = on.year * 12 + (on.month - 1) + months
    year, month = divmod(index, 12)
    return date(year, month + 1, 1) + timedelta(days=on.day - 1)


def shift_years(on: date, years: int) -> date:
    return shift_months(on, years * 12)


def day_distance(left: date, right: date) -> int:
    return abs((left - right).days)
