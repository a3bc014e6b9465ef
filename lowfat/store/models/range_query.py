"""Range bounds for queries over ordered indexes."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict

Number = int | float | Decimal


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


class KeyCondition(BaseModel):
    """Range predicate on an index's sort attribute.

    Both bounds are inclusive. With ``prefix`` set the condition is a
    ``begins_with`` match instead of a numeric range. Bounds that are not numbers are carried
    as given; backing stores reject them with a validation error.
    """

    attribute: str
    lower: Number | str | None = None
    upper: Number | str | None = None
    prefix: str | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def kind(self) -> str:
        if self.prefix is not None:
            return "begins_with"
        if self.lower is not None and self.upper is not None:
            return "between"
        if self.lower is not None:
            return "gte"
        return "lte"

    def matches(self, value: object) -> bool:
        if self.prefix is not None:
            return isinstance(value, str) and value.startswith(self.prefix)
        if not _is_number(value):
            return False
        if not all(_is_number(bound) for bound in (self.lower, self.upper) if bound is not None):
            return False
        if self.lower is not None and value < self.lower:
            return False
        if self.upper is not None and value > self.upper:
            return False
        return True


class RangeQuery(BaseModel):
    """Effective bounds and direction for a time-indexed query."""

    min_ts: int | str | None = None
    max_ts: int | str | None = None
    ascending: bool = True

    model_config = ConfigDict(frozen=True)

    def key_condition(self, attribute: str) -> KeyCondition | None:
        """Translate bounds into a predicate, or None for an unbounded scan."""
        if self.min_ts is None and self.max_ts is None:
            return None
        return KeyCondition(attribute=attribute, lower=self.min_ts, upper=self.max_ts)
