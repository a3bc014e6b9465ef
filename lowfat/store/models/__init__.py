"""Data models."""

from .filter import Filter, FilterList
from .range_query import KeyCondition, RangeQuery
from .responses import BatchResponse, Cursor, ItemResponse, Page, PageStats, QueryResponse, Record

__all__ = [
    "Filter",
    "FilterList",
    "KeyCondition",
    "RangeQuery",
    "ItemResponse",
    "BatchResponse",
    "QueryResponse",
    "Page",
    "PageStats",
    "Record",
    "Cursor",
]
