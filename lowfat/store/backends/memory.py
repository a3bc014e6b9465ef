"""In-process backing store.

Keeps both families in insertion-ordered dictionaries and emulates the
behaviour the retrieval layer relies on: ordered partition queries with
sparse secondary indexes, key-shaped continuation cursors, unique-key batch
reads and validation errors for malformed keys. Useful for tests and local
development.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from decimal import Decimal
from typing import Any

from ..config import StoreConfig
from ..core.base import BackingStore
from ..core.enums import Family, IndexName
from ..core.exceptions import BackendValidationError
from ..models.range_query import KeyCondition
from ..models.responses import BatchResponse, Cursor, ItemResponse, Page, PageStats, Record

logger = logging.getLogger(__name__)

KeyTuple = tuple[str, ...]


def _key_tuple(family: Family, key: Mapping[str, Any]) -> KeyTuple:
    attributes = [family.partition_attribute]
    if family.sort_attribute:
        attributes.append(family.sort_attribute)
    if set(key) != set(attributes):
        raise BackendValidationError(
            f"The provided key element does not match the schema: expected {attributes}"
        )
    values = tuple(key[attribute] for attribute in attributes)
    for value in values:
        if not isinstance(value, str) or value == "":
            raise BackendValidationError(
                "One or more parameter values were invalid: key attributes must be "
                "non-empty strings"
            )
    return values


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


class InMemoryStore(BackingStore):
    """Backing store held in process memory."""

    def __init__(self, config: StoreConfig | None = None) -> None:
        self._config = config or StoreConfig()
        self._tables: dict[Family, dict[KeyTuple, Record]] = {family: {} for family in Family}

    def _capacity(self, family: Family, units: float) -> dict[str, Any]:
        return {"TableName": self._config.table_name(family), "CapacityUnits": units}

    def _key_of(self, family: Family, item: Record) -> Cursor:
        key = {family.partition_attribute: item[family.partition_attribute]}
        if family.sort_attribute:
            key[family.sort_attribute] = item[family.sort_attribute]
        return key

    # Seeding helpers; not part of the BackingStore interface.

    def put_content(self, item: Record) -> None:
        self._tables[Family.CONTENT][_key_tuple(Family.CONTENT, {"ID": item.get("ID")})] = item

    def put_brief(self, item: Record) -> None:
        key = {"Type": item.get("Type"), "IID": item.get("IID")}
        self._tables[Family.BRIEF][_key_tuple(Family.BRIEF, key)] = item

    def load(self, *, content: Sequence[Record] = (), brief: Sequence[Record] = ()) -> None:
        for item in content:
            self.put_content(item)
        for item in brief:
            self.put_brief(item)

    # BackingStore

    async def get_one(self, family: Family, key: dict[str, str]) -> ItemResponse:
        item = self._tables[family].get(_key_tuple(family, key))
        return ItemResponse(item=item, consumed_capacity=self._capacity(family, 0.5))

    async def batch_get(self, family: Family, keys: Sequence[dict[str, str]]) -> BatchResponse:
        tuples = [_key_tuple(family, key) for key in keys]
        if len(set(tuples)) != len(tuples):
            raise BackendValidationError("Provided list of item keys contains duplicates")
        table = self._tables[family]
        items = [table[key] for key in tuples if key in table]
        return BatchResponse(
            items=items,
            consumed_capacity=[self._capacity(family, 0.5 * len(tuples))],
            unprocessed_keys={},
        )

    async def paged_scan(
        self,
        family: Family,
        *,
        page_size: int,
        cursor: Cursor | None = None,
    ) -> Page:
        return self._page(family, list(self._tables[family].values()), page_size, cursor)

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
        if not isinstance(partition, str) or not partition:
            raise BackendValidationError("Partition key value must be a non-empty string")
        if condition is not None and condition.prefix is None:
            for bound in (condition.lower, condition.upper):
                if bound is not None and not _is_number(bound):
                    raise BackendValidationError(
                        f"Invalid range bound for {condition.attribute}: {bound!r}"
                    )

        sort_attribute = index.range_attribute if index else family.sort_attribute
        items = [
            item
            for item in self._tables[family].values()
            if item.get(family.partition_attribute) == partition
            and sort_attribute is not None
            and sort_attribute in item
        ]
        if condition is not None:
            items = [item for item in items if condition.matches(item.get(condition.attribute))]
        items.sort(key=lambda item: item[sort_attribute], reverse=not ascending)
        return self._page(family, items, page_size, cursor)

    def _page(
        self, family: Family, items: list[Record], page_size: int, cursor: Cursor | None
    ) -> Page:
        if not isinstance(page_size, int) or page_size < 1:
            raise BackendValidationError("Limit must be a positive integer")

        start = 0
        if cursor:
            keys = [self._key_of(family, item) for item in items]
            if cursor not in keys:
                raise BackendValidationError("The provided starting key is invalid")
            start = keys.index(cursor) + 1

        chunk = items[start : start + page_size]
        more = start + page_size < len(items)
        next_cursor = self._key_of(family, chunk[-1]) if more and chunk else None
        return Page(
            items=chunk,
            next_cursor=next_cursor,
            stats=PageStats(
                count=len(chunk),
                scanned_count=len(chunk),
                consumed_capacity=self._capacity(family, 0.5 * max(len(chunk), 1)),
            ),
        )
