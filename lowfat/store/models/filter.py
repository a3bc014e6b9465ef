"""Filter predicate model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..core.enums import FilterAction


class Filter(BaseModel):
    """A single keep/remove predicate over a record field path.

    A filter without ``values`` tests the truthiness of the resolved field;
    with ``values`` it tests membership of the field's string form.
    """

    key: str = Field(..., min_length=1)
    values: tuple[str, ...] | None = None
    action: FilterAction = FilterAction.KEEP

    model_config = ConfigDict(frozen=True)

    @property
    def keeps(self) -> bool:
        return self.action is FilterAction.KEEP

    def nested_under(self, field: str) -> Filter:
        """Return a copy whose key is resolved one level below ``field``."""
        return self.model_copy(update={"key": f"{field}.{self.key}"})

    def __str__(self) -> str:
        sign = "" if self.keeps else "-"
        if self.values is None:
            return f"{sign}{self.key}"
        return f"{sign}{self.key}:{','.join(self.values)}"


FilterList = list[Filter]
