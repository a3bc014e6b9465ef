"""Paginated traversal of backend scans and queries."""

from __future__ import annotations

from .pager import PageFetcher, ThrottledPager

__all__ = ["ThrottledPager", "PageFetcher"]
