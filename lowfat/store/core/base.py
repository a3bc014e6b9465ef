"""Backing store interface.

Architecture:
    The store facade, batch fetcher, list selector and pager only ever talk
    to a BackingStore. Implementations own the connection, the physical
    table names and the wire format; everything above them works on plain
    record mappings and the response containers in ``models.responses``.

Design Decisions:
    - Async methods: every call is a suspension point for the caller's task
    - Unique keys: ``batch_get`` callers deduplicate before calling
    - Opaque cursors: implementations choose the cursor shape, callers only
      hand back what they received
    - No retries and no error wrapping at this layer
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from ..models.range_query import KeyCondition
from ..models.responses import BatchResponse, Cursor, ItemResponse, Page
from .enums import Family, IndexName


class BackingStore(ABC):
    """Abstract document store holding the content and brief families."""

    @abstractmethod
    async def get_one(self, family: Family, key: dict[str, str]) -> ItemResponse:
        """Fetch a single record by its full key."""
        raise NotImplementedError

    @abstractmethod
    async def batch_get(self, family: Family, keys: Sequence[dict[str, str]]) -> BatchResponse:
        """Fetch records for a set of unique keys.

        Misses are omitted. The order of ``BatchResponse.items`` is
        unspecified.
        """
        raise NotImplementedError

    @abstractmethod
    async def paged_scan(
        self,
        family: Family,
        *,
        page_size: int,
        cursor: Cursor | None = None,
    ) -> Page:
        """Fetch one page of an unordered full-table traversal."""
        raise NotImplementedError

    @abstractmethod
    async def paged_query(
        self,
        family: Family,
        partition: str,
        *,
        index: IndexName | None = None,
        condition: KeyCondition | None = None,
        page_size: int,
        ascending: bool = True,
        cursor: Cursor | None = None,
    ) -> Page:
        """Fetch one page of a partition ordered by an index's sort attribute.

        With ``index`` None the partition is ordered by the family's own
        sort attribute.
        """
        raise NotImplementedError

    async def close(self) -> None:
        """Release backend resources."""
        return None

    async def __aenter__(self) -> BackingStore:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
