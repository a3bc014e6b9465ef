"""Lowfat Store - async data access for content and brief items."""

from . import filters
from .api import ContentStore
from .backends import InMemoryStore
from .config import StoreConfig
from .core import (
    BackendError,
    BackendValidationError,
    BackingStore,
    Family,
    FilterAction,
    FilterRejectedError,
    IndexName,
    StoreError,
    UsageError,
)
from .models import (
    BatchResponse,
    Filter,
    FilterList,
    ItemResponse,
    KeyCondition,
    Page,
    PageStats,
    QueryResponse,
    RangeQuery,
)
from .runtime import BatchFetcher, ListSelector, RangeQueryPlanner, ThrottledPager

__version__ = "0.3.0"

__all__ = [
    "__version__",
    "filters",
    # Facade
    "ContentStore",
    "StoreConfig",
    # Backends
    "BackingStore",
    "InMemoryStore",
    # Runtime
    "BatchFetcher",
    "ListSelector",
    "RangeQueryPlanner",
    "ThrottledPager",
    # Models
    "Filter",
    "FilterList",
    "RangeQuery",
    "KeyCondition",
    "ItemResponse",
    "BatchResponse",
    "QueryResponse",
    "Page",
    "PageStats",
    # Enums
    "Family",
    "IndexName",
    "FilterAction",
    # Exceptions
    "StoreError",
    "FilterRejectedError",
    "UsageError",
    "BackendError",
    "BackendValidationError",
]
