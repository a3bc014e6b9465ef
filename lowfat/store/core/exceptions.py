"""Custom exception hierarchy."""

from __future__ import annotations


class StoreError(Exception):
    """Base exception for all library errors."""

    pass


class FilterRejectedError(StoreError):
    """Record exists but did not pass the supplied filter.

    Distinct from a missing record: a get that finds nothing returns an
    empty response, a get whose record fails the filter raises this.
    """

    def __init__(self, message: str, record_id: str, filter_expression: str | None) -> None:
        super().__init__(message)
        self.record_id = record_id
        self.filter_expression = filter_expression


class UsageError(StoreError):
    """Required options are missing or cannot be combined."""

    pass


class BackendError(StoreError):
    """Error reported by a backing store implementation."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.code = code


class BackendValidationError(BackendError):
    """Backing store rejected a malformed key or parameter."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="ValidationException")
