"""Filter mini-language: parse expressions and apply them to records.

Usage:
    >>> from lowfat.store import filters
    >>> flt = filters.parse("age:Senior,Adult;-special")
    >>> kept = filters.apply(records, flt)
"""

from __future__ import annotations

from .compiler import parse
from .evaluator import apply, is_truthy, matches, passes, to_string
from .resolver import MISSING, Missing, Resolved, Scalar, Sequence, resolve, split_path

__all__ = [
    "parse",
    "apply",
    "passes",
    "matches",
    "is_truthy",
    "to_string",
    "resolve",
    "split_path",
    "Scalar",
    "Sequence",
    "Missing",
    "MISSING",
    "Resolved",
]
