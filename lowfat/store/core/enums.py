"""Core enumerations shared by the store, filters and backends.

Key Types:
    - Family: the two record families (full content and brief items)
    - IndexName: ordered secondary indexes over brief items
    - FilterAction: keep or remove records matching a filter
"""

from enum import Enum


class Family(str, Enum):
    """Record families and their key schema.

    Content items are keyed by ``ID`` alone. Brief items are keyed by a
    ``Type`` partition plus an ``IID`` within that partition.
    """

    CONTENT = "Content"
    BRIEF = "Brief"

    @property
    def table_suffix(self) -> str:
        return self.value

    @property
    def partition_attribute(self) -> str:
        return "ID" if self is Family.CONTENT else "Type"

    @property
    def sort_attribute(self) -> str | None:
        return None if self is Family.CONTENT else "IID"

    @property
    def natural_key(self) -> str:
        """Attribute that identifies an item within a single batch."""
        return self.sort_attribute or self.partition_attribute

    def make_key(self, value: str, partition: str | None = None) -> dict[str, str]:
        """Build the store key for ``value``.

        For brief items ``partition`` is the item type and ``value`` the IID.
        """
        if self is Family.CONTENT:
            return {"ID": value}
        return {"Type": partition, "IID": value}  # type: ignore[dict-item]


class IndexName(str, Enum):
    """Secondary indexes on the brief family, ordered by a numeric attribute."""

    TYPE_TS = "TypeTS"
    TYPE_FEATURED = "TypeFeatured"

    @property
    def range_attribute(self) -> str:
        return "TS" if self is IndexName.TYPE_TS else "FeatureDate"


class FilterAction(str, Enum):
    KEEP = "keep"
    REMOVE = "remove"
