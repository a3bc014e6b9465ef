"""Calendar date helpers for time-indexed queries.

All instants are timezone-aware UTC datetimes; store timestamps are epoch
milliseconds.
"""

from __future__ import annotations

import re
from datetime import UTC, date, datetime, time, timedelta
from decimal import Decimal
from typing import Any

_RELATIVE = re.compile(r"^([+-])(\d+)([dw])$")
_EPOCH_MS = re.compile(r"^\d{10,}$")
_KEYWORD_OFFSETS = {"today": 0, "yesterday": -1, "tomorrow": 1}


def utc_now() -> datetime:
    return datetime.now(UTC)


def now_ts() -> int:
    """Current time in epoch milliseconds."""
    return date_to_ts(utc_now())


def date_to_ts(value: datetime) -> int:
    return int(value.timestamp() * 1000)


def ts_to_date(value: int | float | Decimal) -> datetime:
    return datetime.fromtimestamp(float(value) / 1000.0, tz=UTC)


def start_of_day(value: datetime) -> datetime:
    return datetime.combine(value.astimezone(UTC).date(), time.min, tzinfo=UTC)


def end_of_day(value: datetime) -> datetime:
    return datetime.combine(value.astimezone(UTC).date(), time.max, tzinfo=UTC)


def convert_date(value: Any, reference: datetime | None = None) -> datetime | None:
    """Convert a loosely typed date option to a UTC datetime.

    Accepts datetimes, dates, epoch milliseconds (numbers or digit strings of
    ten or more characters), ISO 8601 strings, the keywords ``now``,
    ``today``, ``yesterday`` and ``tomorrow``, and relative offsets such as
    ``+7d`` or ``-2w``. Offsets are measured from ``reference`` when given,
    otherwise from the start of today.

    Returns None for missing or unparsable values.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=UTC)
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=UTC)
    if isinstance(value, (int, float, Decimal)):
        return ts_to_date(value)
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None
    lowered = text.lower()
    if lowered == "now":
        return utc_now()
    if lowered in _KEYWORD_OFFSETS:
        return start_of_day(utc_now()) + timedelta(days=_KEYWORD_OFFSETS[lowered])

    relative = _RELATIVE.match(lowered)
    if relative:
        sign, amount, unit = relative.groups()
        days = int(amount) * (7 if unit == "w" else 1)
        base = reference if reference is not None else start_of_day(utc_now())
        return base + timedelta(days=days if sign == "+" else -days)

    if _EPOCH_MS.match(text):
        return ts_to_date(int(text))

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=UTC)


def min_max_date(
    first: datetime | None, second: datetime | None
) -> tuple[datetime | None, datetime | None]:
    """Order two dates into an inclusive whole-day window.

    The earlier date is moved to the start of its day and the later one to
    the end of its day. When only one date is present it bounds the window
    on its own side: a lone first date is a lower bound, a lone second date
    an upper bound.
    """
    if first is not None and second is not None:
        low, high = (first, second) if first <= second else (second, first)
        return start_of_day(low), end_of_day(high)
    if first is not None:
        return start_of_day(first), None
    if second is not None:
        return None, end_of_day(second)
    return None, None
