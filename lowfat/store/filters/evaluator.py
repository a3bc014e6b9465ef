"""Filter evaluation over record lists.

Comparison is done on string forms, the way a query-string value would be
written: ``True`` matches ``"true"``, ``7`` matches ``"7"`` and ``7.0`` also
matches ``"7"``. Truthiness follows the same convention, so empty strings,
zero, ``False``, ``None`` and missing fields are falsy while any sequence or
mapping, even an empty one, is truthy.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping, Sequence as SequenceABC
from decimal import Decimal
from typing import Any, TypeVar

from ..models.filter import Filter
from .resolver import Missing, Resolved, Scalar, Sequence, resolve

logger = logging.getLogger(__name__)

T = TypeVar("T")


def to_string(value: Any) -> str:
    """Render a field value as text for membership comparison."""
    if isinstance(value, Missing):
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        return str(int(value)) if value.is_integer() else repr(value)
    if isinstance(value, Decimal):
        if value.is_finite() and value == value.to_integral_value():
            return str(int(value))
        return str(value.normalize())
    if isinstance(value, Mapping):
        return "[object Object]"
    if isinstance(value, SequenceABC) and not isinstance(value, (str, bytes, bytearray)):
        return ",".join("" if item is None else to_string(item) for item in value)
    return str(value)


def is_truthy(value: Any) -> bool:
    if isinstance(value, Missing) or value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float, Decimal)):
        return not (value == 0 or value != value)
    if isinstance(value, str):
        return value != ""
    return True


def matches(resolved: Resolved, values: tuple[str, ...] | None) -> bool:
    """Evaluate a filter's predicate on a resolved field."""
    if isinstance(resolved, Sequence):
        if values is None:
            return True
        return any(to_string(item) in values for item in resolved.values)
    if isinstance(resolved, Scalar):
        if values is None:
            return is_truthy(resolved.value)
        return to_string(resolved.value) in values
    # Missing
    if values is None:
        return False
    return to_string(resolved) in values


def passes(record: Any, flt: Filter) -> bool:
    """Whether ``record`` survives ``flt``."""
    hit = matches(resolve(record, flt.key), flt.values)
    return hit if flt.keeps else not hit


def apply(records: list[T] | None, filters: list[Filter] | None) -> list[T] | None:
    """Narrow ``records`` by each filter in turn.

    Returns the input object itself when either argument is empty or None.
    """
    if not records or not filters:
        return records

    filtered = list(records)
    for flt in filters:
        if flt is None:
            continue
        filtered = [record for record in filtered if passes(record, flt)]
        if not filtered:
            break
    logger.debug(
        "filters_applied",
        extra={
            "filters": [str(f) for f in filters if f is not None],
            "input_count": len(records),
            "output_count": len(filtered),
        },
    )
    return filtered
