"""Public read API."""

from __future__ import annotations

from .content_store import ContentStore

__all__ = ["ContentStore"]
