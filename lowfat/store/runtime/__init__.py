"""Retrieval runtime: paging, range planning, batch fetching and list selection."""

from __future__ import annotations

from .batch import BatchFetcher
from .paging import PageFetcher, ThrottledPager
from .planning import RangeQueryPlanner
from .selection import ListSelector, split_ids, strip_type_prefix

__all__ = [
    "BatchFetcher",
    "ListSelector",
    "PageFetcher",
    "RangeQueryPlanner",
    "ThrottledPager",
    "split_ids",
    "strip_type_prefix",
]
