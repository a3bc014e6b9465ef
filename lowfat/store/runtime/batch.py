"""Batch retrieval preserving caller key order.

Backends reject duplicate keys within one batch request and return hits in
no particular order. The fetcher deduplicates before calling the backend,
then rebuilds the caller's sequence from the response: duplicates appear as
many times as requested (as the same record object) and misses are dropped.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..core.base import BackingStore
from ..core.enums import Family
from ..models.responses import BatchResponse

logger = logging.getLogger(__name__)


class BatchFetcher:
    """Fetches many records of one family in a single backend call."""

    def __init__(
        self, store: BackingStore, family: Family, *, partition: str | None = None
    ) -> None:
        """Initialize the fetcher.

        Args:
            store: Backing store to read from
            family: Record family of the keys
            partition: Brief item type; required for the brief family
        """
        if family is Family.BRIEF and partition is None:
            raise ValueError("partition is required when fetching brief items")
        self._store = store
        self._family = family
        self._partition = partition

    async def fetch(self, keys: Sequence[str] | None) -> BatchResponse:
        """Fetch records for ``keys`` in caller order, omitting misses."""
        if not keys:
            logger.info(
                "batch_get_skipped",
                extra={"family": self._family.value, "partition": self._partition},
            )
            return BatchResponse(items=[])

        unique = list(dict.fromkeys(keys))
        logger.info(
            "batch_get",
            extra={
                "family": self._family.value,
                "partition": self._partition,
                "keys": list(keys),
                "unique_count": len(unique),
            },
        )
        response = await self._store.batch_get(
            self._family,
            [self._family.make_key(key, self._partition) for key in unique],
        )

        natural_key = self._family.natural_key
        lookup = {item[natural_key]: item for item in response.items if natural_key in item}
        items = [lookup[key] for key in keys if key in lookup]
        return BatchResponse(
            items=items,
            consumed_capacity=response.consumed_capacity,
            unprocessed_keys=response.unprocessed_keys,
        )
