"""Throttled, cursor-driven page traversal.

The pager turns a backend's page-at-a-time primitive into a lazy async
sequence of records. It never retries: a failed fetch ends the traversal
with the backend's exception.
"""

from __future__ import annotations

import asyncio
import time
from collections.abc import AsyncGenerator, Awaitable, Callable

from ...filters.evaluator import apply as apply_filters
from ...models.filter import Filter
from ...models.responses import Cursor, Page, Record
from .telemetry import log_page_error, log_page_fetched, log_page_throttled

PageFetcher = Callable[[Cursor | None], Awaitable[Page]]


class ThrottledPager:
    """Lazy sequence of records fetched page by page.

    Successive fetches start at least ``throttle_ms`` apart, measured from
    the start of one fetch to the start of the next, so backend latency
    counts toward the spacing. Items are yielded in page order and within
    a page in backend order. Iteration stops when a page comes back
    without a continuation cursor.

    Each ``async for`` over the pager starts a new traversal from the
    first page. Abandoning an iteration early issues no further fetches.

    Example:
        >>> pager = ThrottledPager(fetch, page_size=10, throttle_ms=250)
        >>> async for record in pager:
        ...     handle(record)
    """

    def __init__(
        self,
        fetch_page: PageFetcher,
        *,
        page_size: int = 10,
        throttle_ms: int = 1000,
        name: str = "pager",
        filters: list[Filter] | None = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        """Initialize the pager.

        Args:
            fetch_page: Async callable taking a cursor (None for the first
                page) and returning a Page
            page_size: Page size the fetcher was configured with, for telemetry
            throttle_ms: Minimum milliseconds between fetch starts; 0 disables
            name: Traversal identifier used in logs
            filters: Optional filters applied to each page before yielding
            clock: Monotonic clock in seconds
            sleep: Async sleep taking seconds
        """
        self._fetch_page = fetch_page
        self._page_size = page_size
        self._throttle_ms = throttle_ms
        self._name = name
        self._filters = filters
        self._clock = clock
        self._sleep = sleep

    @property
    def name(self) -> str:
        return self._name

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def throttle_ms(self) -> int:
        return self._throttle_ms

    def __aiter__(self) -> AsyncGenerator[Record, None]:
        return self._traverse()

    async def _throttle(self, last_call_at: float | None, page: int) -> None:
        if self._throttle_ms <= 0 or last_call_at is None:
            return
        elapsed_ms = (self._clock() - last_call_at) * 1000.0
        if elapsed_ms < self._throttle_ms:
            wait_ms = self._throttle_ms - elapsed_ms
            log_page_throttled(name=self._name, page=page, wait_ms=wait_ms)
            await self._sleep(wait_ms / 1000.0)

    async def _traverse(self) -> AsyncGenerator[Record, None]:
        cursor: Cursor | None = None
        last_call_at: float | None = None
        page = 0
        total = 0
        total_scanned = 0

        while True:
            await self._throttle(last_call_at, page)

            last_call_at = self._clock()
            try:
                result = await self._fetch_page(cursor)
            except Exception as e:
                log_page_error(
                    name=self._name,
                    page=page,
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                raise
            latency_ms = (self._clock() - last_call_at) * 1000.0

            total += result.stats.count
            total_scanned += result.stats.scanned_count
            log_page_fetched(
                name=self._name,
                page=page,
                page_size=self._page_size,
                stats=result.stats,
                total=total,
                total_scanned=total_scanned,
                next_cursor=result.next_cursor,
                latency_ms=latency_ms,
            )

            items = result.items
            if self._filters:
                items = apply_filters(items, self._filters) or []
            for item in items:
                yield item

            page += 1
            cursor = result.next_cursor
            if not cursor:
                break
