"""High-level read API over a backing store.

Architecture:
    ContentStore is the facade callers use. Each operation coerces its
    option mapping through an option model, delegates to the runtime
    components and applies the caller's filter expression to the results:

    - get / get_brief: point reads; ``get`` filters the item's ``Data``
    - get_batch / get_batch_brief: BatchFetcher
    - query_by_type_ts: RangeQueryPlanner + one page of the TypeTS index
    - query_by_type_featured: one page of the TypeFeatured index up to now
    - get_list / get_random_list: ListSelector
    - scan / scan_brief / scan_table / query_by_type: ThrottledPager

Design Decisions:
    - Options accept transport names (``minTS``, ``pageSize``) and
      snake_case field names alike
    - Backend errors propagate unchanged; only a filtered-out point read
      raises a library error (FilterRejectedError)
    - Traversals are returned un-started; nothing is fetched until the
      caller iterates
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Mapping, Sequence
from functools import partial
from typing import Any

from ..config import StoreConfig
from ..core.base import BackingStore
from ..core.enums import Family, IndexName
from ..core.exceptions import FilterRejectedError
from ..core.options import (
    FeaturedOptions,
    GetOptions,
    ListOptions,
    ScanOptions,
    TimeRangeOptions,
    TypeQueryOptions,
)
from ..filters import compiler, evaluator
from ..models.range_query import KeyCondition
from ..models.responses import BatchResponse, Cursor, ItemResponse, Page, QueryResponse, Record
from ..runtime.batch import BatchFetcher
from ..runtime.paging import ThrottledPager
from ..runtime.planning import RangeQueryPlanner
from ..runtime.selection import DATA_FIELD, ListSelector
from ..utils.dates import now_ts

logger = logging.getLogger(__name__)

Options = Mapping[str, Any] | None


class ContentStore:
    """Read operations over content and brief items.

    Example:
        >>> store = ContentStore(InMemoryStore())
        >>> response = await store.query_by_type_ts("event", {"startDate": "2017-08-05"})
        >>> async for item in store.query_by_type("event", {"throttle": 0}):
        ...     print(item["IID"])
    """

    def __init__(
        self,
        backend: BackingStore,
        *,
        config: StoreConfig | None = None,
        rng: random.Random | None = None,
        clock: Callable[[], int] = now_ts,
    ) -> None:
        """Initialize the store.

        Args:
            backend: Backing store implementation
            config: Used for table names in logs
            rng: Random source for random list selection
            clock: Current time in epoch milliseconds, bounds featured queries
        """
        self._backend = backend
        self._config = config or StoreConfig()
        self._planner = RangeQueryPlanner()
        self._selector = ListSelector(backend, rng=rng)
        self._clock = clock

    @property
    def backend(self) -> BackingStore:
        return self._backend

    def _label(self, family: Family, operation: str) -> str:
        return f"{self._config.table_name(family)}.{operation}"

    # Point reads

    async def get(self, content_id: str, options: Options = None) -> ItemResponse:
        """Get a content item by id.

        Raises:
            FilterRejectedError: The item exists but its ``Data`` fails the
                ``filter`` option
        """
        opts = GetOptions.build(options)
        filters = compiler.parse(opts.filter)
        logger.info(
            "content_get",
            extra={"operation": self._label(Family.CONTENT, "GET"), "id": content_id},
        )
        response = await self._backend.get_one(
            Family.CONTENT, Family.CONTENT.make_key(content_id)
        )

        item = response.item
        if filters and item and item.get(DATA_FIELD):
            if not evaluator.apply([item[DATA_FIELD]], filters):
                raise FilterRejectedError(
                    f"{content_id} was rejected by filter {opts.filter}",
                    record_id=content_id,
                    filter_expression=opts.filter,
                )
        return response

    async def get_brief(self, type_: str, iid: str) -> ItemResponse:
        logger.info(
            "brief_get",
            extra={
                "operation": self._label(Family.BRIEF, "GETBRIEF"),
                "item_type": type_,
                "iid": iid,
            },
        )
        return await self._backend.get_one(Family.BRIEF, Family.BRIEF.make_key(iid, type_))

    # Batch reads

    async def get_batch(self, ids: Sequence[str] | None) -> BatchResponse:
        return await BatchFetcher(self._backend, Family.CONTENT).fetch(ids)

    async def get_batch_brief(self, type_: str, iids: Sequence[str] | None) -> BatchResponse:
        return await BatchFetcher(self._backend, Family.BRIEF, partition=type_).fetch(iids)

    # Index queries

    async def query_by_type_ts(self, type_: str, options: Options = None) -> QueryResponse:
        """Query brief items of a type ordered by ``TS``.

        Explicit ``minTS``/``maxTS`` bounds take precedence over bounds
        derived from ``startDate``/``endDate``. Returns a single page of at
        most ``limit`` items before filtering.
        """
        opts = TimeRangeOptions.build(options)
        plan = self._planner.plan(opts)
        logger.info(
            "query_by_type_ts",
            extra={
                "operation": self._label(Family.BRIEF, "QUERY"),
                "item_type": type_,
                "min_ts": plan.min_ts,
                "max_ts": plan.max_ts,
                "ascending": plan.ascending,
            },
        )
        page = await self._backend.paged_query(
            Family.BRIEF,
            type_,
            index=IndexName.TYPE_TS,
            condition=plan.key_condition(IndexName.TYPE_TS.range_attribute),
            page_size=opts.limit,
            ascending=plan.ascending,
        )
        return self._filtered("query_by_type_ts", type_, page, opts.filter)

    async def query_by_type_featured(self, type_: str, options: Options = None) -> QueryResponse:
        """Query brief items of a type featured up to now, newest first by default."""
        opts = FeaturedOptions.build(options)
        now = self._clock()
        logger.info(
            "query_by_type_featured",
            extra={
                "operation": self._label(Family.BRIEF, "QUERY"),
                "item_type": type_,
                "feature_date_max": now,
            },
        )
        page = await self._backend.paged_query(
            Family.BRIEF,
            type_,
            index=IndexName.TYPE_FEATURED,
            condition=KeyCondition(
                attribute=IndexName.TYPE_FEATURED.range_attribute, upper=now
            ),
            page_size=opts.limit,
            ascending=opts.ascending,
        )
        return self._filtered("query_by_type_featured", type_, page, opts.filter)

    def _filtered(
        self, operation: str, type_: str, page: Page, expression: str | None
    ) -> QueryResponse:
        response = QueryResponse.from_page(page)
        filters = compiler.parse(expression)
        if filters:
            before = len(response.items)
            response.items = evaluator.apply(response.items, filters) or []
            logger.info(
                "query_filtered",
                extra={
                    "query": operation,
                    "item_type": type_,
                    "before": before,
                    "after": len(response.items),
                },
            )
        return response

    # Lists

    async def get_list(self, type_: str, options: Options = None) -> BatchResponse:
        """Get a window of items named by ``ids`` or by a stored ``list``.

        Options: ``start`` (0), ``limit`` (5), ``list``, ``ids``, ``random``,
        ``full`` and ``filter``. ``start`` is ignored when picking randomly.

        Raises:
            UsageError: Neither ``list`` nor ``ids`` was given
        """
        return await self._selector.select(type_, ListOptions.build(options))

    async def get_random_list(self, type_: str, options: Options = None) -> BatchResponse:
        return await self.get_list(type_, {**(options or {}), "random": True})

    # Traversals

    def scan_table(
        self, family: Family, options: Options = None, **defaults: Any
    ) -> ThrottledPager:
        """Traverse an entire table page by page."""
        opts = ScanOptions.build(options, **defaults)

        async def fetch(cursor: Cursor | None) -> Page:
            return await self._backend.paged_scan(family, page_size=opts.page_size, cursor=cursor)

        return ThrottledPager(
            fetch,
            page_size=opts.page_size,
            throttle_ms=opts.throttle,
            name=self._label(family, "SCAN"),
            filters=compiler.parse(opts.filter),
        )

    def scan(self, options: Options = None) -> ThrottledPager:
        """Traverse all content items; defaults to one item per page."""
        return self.scan_table(Family.CONTENT, options, page_size=1, throttle=1000)

    def scan_brief(self, options: Options = None) -> ThrottledPager:
        return self.scan_table(Family.BRIEF, options, page_size=10, throttle=1000)

    def query_by_type(self, type_: str, options: Options = None) -> ThrottledPager:
        """Traverse every brief item of a type in ``IID`` order.

        Options: ``prefix`` (restricts IIDs), ``ascending`` (True),
        ``pageSize`` (10), ``throttle`` (1000 ms) and ``filter``.
        """
        opts = TypeQueryOptions.build(options)
        condition = (
            KeyCondition(attribute=Family.BRIEF.natural_key, prefix=opts.prefix)
            if opts.prefix
            else None
        )
        fetch = partial(
            self._backend.paged_query,
            Family.BRIEF,
            type_,
            condition=condition,
            page_size=opts.page_size,
            ascending=opts.ascending,
        )
        return ThrottledPager(
            lambda cursor: fetch(cursor=cursor),
            page_size=opts.page_size,
            throttle_ms=opts.throttle,
            name=f"{self._label(Family.BRIEF, 'QUERY')}[{type_}]",
            filters=compiler.parse(opts.filter),
        )

    async def first(self, traversal: ThrottledPager) -> Record | None:
        """Return the first record of a traversal without fetching further pages."""
        iterator = aiter(traversal)
        try:
            return await anext(iterator, None)
        finally:
            await iterator.aclose()

    async def close(self) -> None:
        await self._backend.close()

    async def __aenter__(self) -> ContentStore:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
