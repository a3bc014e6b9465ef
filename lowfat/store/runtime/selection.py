"""List selection: pick a window of identifiers and hydrate it.

Architecture:
    1. Resolve the identifier source: an explicit comma-separated ``ids``
       option, or a ``list`` option naming a content item whose
       ``Data[<type>]`` field holds the identifiers. ``ids`` wins when both
       are given.
    2. Window the identifiers: a ``[start, start + limit)`` slice, or a
       random sample of ``limit`` identifiers.
    3. Hydrate through BatchFetcher, as brief items of the type or, with
       ``full``, as content items.
    4. Apply filters. Content items wrap caller data under ``Data``, so
       filters are re-targeted one level down when hydrating full items.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from ..core.base import BackingStore
from ..core.enums import Family
from ..core.exceptions import UsageError
from ..core.options import ListOptions
from ..filters import compiler, evaluator
from ..filters.resolver import Sequence as ResolvedSequence
from ..filters.resolver import resolve
from ..models.responses import BatchResponse
from .batch import BatchFetcher

logger = logging.getLogger(__name__)

DATA_FIELD = "Data"


def split_ids(ids: str | Sequence[str]) -> list[str]:
    if isinstance(ids, str):
        return [value.strip() for value in ids.split(",")]
    return [str(value).strip() for value in ids]


def strip_type_prefix(type_: str, iid: str) -> str:
    """Drop a leading ``<type>#`` from an identifier."""
    prefix = f"{type_}#"
    if isinstance(iid, str) and iid.startswith(prefix):
        return iid[len(prefix):]
    return iid


class ListSelector:
    """Selects and hydrates a window of items from an identifier list."""

    def __init__(self, store: BackingStore, *, rng: random.Random | None = None) -> None:
        """Initialize the selector.

        Args:
            store: Backing store to read lists and items from
            rng: Random source for sampling; seed it for reproducible picks
        """
        self._store = store
        self._rng = rng or random.Random()

    async def resolve_ids(self, type_: str, options: ListOptions) -> list[str]:
        if options.ids:
            return split_ids(options.ids)
        if options.list_id:
            response = await self._store.get_one(
                Family.CONTENT, Family.CONTENT.make_key(options.list_id)
            )
            if response.item is None:
                return []
            resolved = resolve(response.item, [DATA_FIELD, type_])
            if isinstance(resolved, ResolvedSequence):
                # Stored lists may hold numbers (Decimal from DynamoDB)
                return [evaluator.to_string(value) for value in resolved.values]
            return []
        raise UsageError("You must specify `list` or `ids` args")

    def window(self, ids: list[str], options: ListOptions) -> list[str]:
        """Pick the identifiers to hydrate."""
        limit = max(options.limit, 0)
        if options.random:
            if len(ids) <= limit:
                shuffled = list(ids)
                self._rng.shuffle(shuffled)
                return shuffled
            return self._rng.sample(ids, limit)
        start = max(options.start, 0)
        return ids[start : start + limit]

    async def select(self, type_: str, options: ListOptions) -> BatchResponse:
        """Resolve, window, hydrate and filter a list of ``type_`` items."""
        logger.info("list_select_started", extra={"item_type": type_})
        all_ids = await self.resolve_ids(type_, options)
        selected = self.window(all_ids, options)

        if options.full:
            data = await BatchFetcher(self._store, Family.CONTENT).fetch(selected)
        else:
            fetcher = BatchFetcher(self._store, Family.BRIEF, partition=type_)
            data = await fetcher.fetch([strip_type_prefix(type_, iid) for iid in selected])

        filters = compiler.parse(options.filter)
        if filters:
            if options.full:
                filters = [f.nested_under(DATA_FIELD) for f in filters]
            before = len(data.items)
            data.items = evaluator.apply(data.items, filters) or []
            logger.info(
                "list_filtered",
                extra={"item_type": type_, "before": before, "after": len(data.items)},
            )
        return data
