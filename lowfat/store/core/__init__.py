"""Core components."""

from .base import BackingStore
from .enums import Family, FilterAction, IndexName
from .exceptions import (
    BackendError,
    BackendValidationError,
    FilterRejectedError,
    StoreError,
    UsageError,
)
from .options import (
    FeaturedOptions,
    GetOptions,
    ListOptions,
    ReadOptions,
    ScanOptions,
    TimeRangeOptions,
    TypeQueryOptions,
    coerce_flag,
    coerce_int,
)

__all__ = [
    "BackingStore",
    "Family",
    "FilterAction",
    "IndexName",
    "StoreError",
    "FilterRejectedError",
    "UsageError",
    "BackendError",
    "BackendValidationError",
    "ReadOptions",
    "GetOptions",
    "TimeRangeOptions",
    "FeaturedOptions",
    "ListOptions",
    "ScanOptions",
    "TypeQueryOptions",
    "coerce_flag",
    "coerce_int",
]
