"""Field-path resolution over nested records.

A path is a dotted string (``Data.tags``); integer segments index into
sequences and the bracket form ``tags[0]`` is accepted as ``tags.0``.
A key that itself contains dots (``"a.b"``) is matched whole before the
path is split.
Resolution yields exactly one of three variants so predicates can be
written per variant instead of probing runtime types.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence as SequenceABC
from dataclasses import dataclass
from typing import Any

_BRACKET = re.compile(r"\[(\d+)\]")


@dataclass(frozen=True)
class Scalar:
    value: Any


@dataclass(frozen=True)
class Sequence:
    values: tuple[Any, ...]


@dataclass(frozen=True)
class Missing:
    pass


MISSING = Missing()

Resolved = Scalar | Sequence | Missing


def split_path(path: str) -> list[str]:
    return [segment for segment in _BRACKET.sub(r".\1", path).split(".") if segment]


def _is_sequence(value: Any) -> bool:
    return isinstance(value, SequenceABC) and not isinstance(value, (str, bytes, bytearray))


def _step(current: Any, segment: str) -> Any:
    if isinstance(current, Mapping):
        return current.get(segment, MISSING)
    if _is_sequence(current) and segment.isdigit():
        index = int(segment)
        return current[index] if index < len(current) else MISSING
    return MISSING


def _wrap(value: Any) -> Resolved:
    if _is_sequence(value):
        return Sequence(tuple(value))
    return Scalar(value)


def resolve(record: Any, path: str | list[str]) -> Resolved:
    """Resolve ``path`` against ``record``.

    A string path naming an existing top-level key, dots included, resolves
    to that key before the path is split.
    """
    if isinstance(path, str) and isinstance(record, Mapping) and path in record:
        return _wrap(record[path])

    segments = split_path(path) if isinstance(path, str) else list(path)
    if not segments:
        return MISSING

    current = record
    for segment in segments:
        current = _step(current, segment)
        if current is MISSING:
            return MISSING
    return _wrap(current)
