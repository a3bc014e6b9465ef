"""Result containers returned by backends and the store facade.

Records inside these containers are the backend's own mappings; they are
passed through by reference and never copied or mutated.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

Record = dict[str, Any]
Cursor = dict[str, Any]


@dataclass
class ItemResponse:
    """Result of a single-item read.

    Attributes:
        item: The record, or None when no item exists for the key
        consumed_capacity: Backend-reported capacity metadata
    """

    item: Record | None = None
    consumed_capacity: Any = None

    @property
    def found(self) -> bool:
        return self.item is not None


@dataclass
class BatchResponse:
    """Result of a batch read.

    Attributes:
        items: Records in caller key order; misses omitted
        consumed_capacity: Backend-reported capacity metadata
        unprocessed_keys: Keys the backend did not process
    """

    items: list[Record] = field(default_factory=list)
    consumed_capacity: Any = None
    unprocessed_keys: Any = None


@dataclass
class PageStats:
    count: int = 0
    scanned_count: int = 0
    consumed_capacity: Any = None


@dataclass
class Page:
    """One page of a scan or query.

    ``next_cursor`` is None when the traversal is complete.
    """

    items: list[Record] = field(default_factory=list)
    next_cursor: Cursor | None = None
    stats: PageStats = field(default_factory=PageStats)


@dataclass
class QueryResponse:
    """Result of a single-page index query, after post-filtering."""

    items: list[Record] = field(default_factory=list)
    count: int = 0
    scanned_count: int = 0
    last_evaluated_key: Cursor | None = None
    consumed_capacity: Any = None

    @classmethod
    def from_page(cls, page: Page) -> QueryResponse:
        return cls(
            items=page.items,
            count=page.stats.count,
            scanned_count=page.stats.scanned_count,
            last_evaluated_key=page.next_cursor,
            consumed_capacity=page.stats.consumed_capacity,
        )
