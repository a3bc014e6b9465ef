"""Structured logging for paginated traversals.

Emits one event per page fetched, per throttle wait and per failure, with
structured ``extra`` payloads for downstream log processors.
"""

from __future__ import annotations

import logging
from typing import Any

from ...models.responses import PageStats

logger = logging.getLogger(__name__)


def log_page_throttled(*, name: str, page: int, wait_ms: float) -> None:
    """Log a throttle wait before fetching ``page``.

    Args:
        name: Traversal identifier (e.g. ``Dev_Brief.SCAN``)
        page: Zero-based index of the page about to be fetched
        wait_ms: Milliseconds slept
    """
    logger.debug(
        "page_throttled",
        extra={"traversal": name, "page": page, "wait_ms": round(wait_ms, 3)},
    )


def log_page_fetched(
    *,
    name: str,
    page: int,
    page_size: int,
    stats: PageStats,
    total: int,
    total_scanned: int,
    next_cursor: Any,
    latency_ms: float | None = None,
) -> None:
    """Log completion of a single page.

    Args:
        name: Traversal identifier
        page: Zero-based page index
        page_size: Requested page size
        stats: Backend statistics for the page
        total: Items returned so far, this page included
        total_scanned: Items examined by the backend so far
        next_cursor: Continuation cursor returned with the page
        latency_ms: Backend call latency in milliseconds
    """
    logger.info(
        "page_fetched",
        extra={
            "traversal": name,
            "page": page,
            "page_size": page_size,
            "count": stats.count,
            "scanned_count": stats.scanned_count,
            "total": total,
            "total_scanned": total_scanned,
            "last_evaluated_key": next_cursor,
            "consumed_capacity": stats.consumed_capacity,
            "latency_ms": latency_ms,
        },
    )


def log_page_error(*, name: str, page: int, error_type: str, error_message: str) -> None:
    logger.error(
        "page_error",
        extra={
            "traversal": name,
            "page": page,
            "error_type": error_type,
            "error_message": error_message,
        },
    )
