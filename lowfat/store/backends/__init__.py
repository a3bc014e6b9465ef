"""Backing store implementations."""

from __future__ import annotations

from typing import Any

from .memory import InMemoryStore

__all__ = ["InMemoryStore", "DynamoDBStore"]


def __getattr__(name: str) -> Any:
    # boto3 is only imported when the DynamoDB backend is requested
    if name == "DynamoDBStore":
        from .dynamodb import DynamoDBStore

        globals()[name] = DynamoDBStore
        return DynamoDBStore
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
