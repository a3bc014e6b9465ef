"""Option models for read operations.

Architecture:
    Read operations take a loose mapping of options, typically forwarded
    from an HTTP query string, so every value may arrive as a string.
    Each operation has a frozen pydantic model that accepts the camelCase
    transport names (``minTS``, ``pageSize``) as aliases of the snake_case
    fields and coerces values before validation.

Coercion rules:
    - Flags: ``True``, ``"true"`` and ``"1"`` are true, anything else false
    - Integers: base 10 from a leading digit run (``"12"`` and ``"12px"``
      are 12); values that do not parse leave the option unset so its
      default applies
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def coerce_flag(value: Any) -> bool:
    """Interpret a transport flag value."""
    return value is True or value == "true" or value == "1"


def coerce_int(value: Any) -> int | None:
    """Parse an integer option, returning None when it cannot be parsed."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, (float, Decimal)):
        if isinstance(value, float) and not math.isfinite(value):
            return None
        if isinstance(value, Decimal) and not value.is_finite():
            return None
        return int(value)
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        return int(match.group(1), 10) if match else None
    return None


class ReadOptions(BaseModel):
    """Base for option models; every read accepts a filter expression."""

    int_fields: ClassVar[frozenset[str]] = frozenset()
    flag_fields: ClassVar[frozenset[str]] = frozenset()

    filter: str | None = None

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    @classmethod
    def _normalize(cls, data: Mapping[str, Any]) -> dict[str, Any]:
        aliases = {f.alias: name for name, f in cls.model_fields.items() if f.alias}
        normalized: dict[str, Any] = {}
        for key, value in data.items():
            name = aliases.get(key, key)
            if name in cls.int_fields:
                value = coerce_int(value)
                if value is None:
                    continue
            elif name in cls.flag_fields:
                value = coerce_flag(value)
            normalized[name] = value
        return normalized

    @model_validator(mode="before")
    @classmethod
    def _coerce(cls, data: Any) -> Any:
        if isinstance(data, Mapping):
            return cls._normalize(data)
        return data

    @classmethod
    def build(cls, options: Mapping[str, Any] | None = None, /, **defaults: Any):
        """Merge call-site ``defaults`` with caller ``options`` and validate.

        Caller options win over defaults; options that fail coercion fall
        back to the default.
        """
        merged = cls._normalize(defaults)
        merged.update(cls._normalize(options or {}))
        return cls.model_validate(merged)


class GetOptions(ReadOptions):
    pass


class TimeRangeOptions(ReadOptions):
    """Options for queries over the time-ordered index.

    ``ascending`` stays tri-state (None when unset); the range planner
    resolves it against the supplied dates. ``min_ts``/``max_ts`` are kept
    as given and parsed by the planner, so a bound that is not a number
    still reaches the backing store.
    """

    int_fields: ClassVar[frozenset[str]] = frozenset({"limit"})

    limit: int = 10
    ascending: bool | str | None = None
    min_ts: Any = Field(default=None, alias="minTS")
    max_ts: Any = Field(default=None, alias="maxTS")
    start_date: Any = Field(default=None, alias="startDate")
    end_date: Any = Field(default=None, alias="endDate")


class FeaturedOptions(ReadOptions):
    int_fields: ClassVar[frozenset[str]] = frozenset({"limit"})
    flag_fields: ClassVar[frozenset[str]] = frozenset({"ascending"})

    limit: int = 5
    ascending: bool = False


class ListOptions(ReadOptions):
    """Options for list selection.

    Exactly one of ``ids`` or ``list_id`` (transport name ``list``) is
    expected; ``ids`` wins when both are present.
    """

    int_fields: ClassVar[frozenset[str]] = frozenset({"start", "limit"})
    flag_fields: ClassVar[frozenset[str]] = frozenset({"random", "full"})

    start: int = 0
    limit: int = 5
    list_id: str | None = Field(default=None, alias="list")
    ids: str | list[str] | None = None
    random: bool = False
    full: bool = False


class ScanOptions(ReadOptions):
    """Options for paginated traversals.

    ``throttle`` is the minimum spacing between store calls in milliseconds.
    """

    int_fields: ClassVar[frozenset[str]] = frozenset({"page_size", "throttle"})

    page_size: int = Field(default=10, alias="pageSize")
    throttle: int = 1000


class TypeQueryOptions(ScanOptions):
    flag_fields: ClassVar[frozenset[str]] = frozenset({"ascending"})

    prefix: str | None = None
    ascending: bool = True
