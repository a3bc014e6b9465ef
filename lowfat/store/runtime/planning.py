"""Range planning for queries over the time-ordered index.

Architecture:
    Callers describe a window either with explicit epoch-millisecond bounds
    (``minTS``/``maxTS``) or with calendar dates (``startDate``/``endDate``).
    The planner reconciles the two into a RangeQuery: explicit bounds win,
    dates fill in whichever bound is missing, and the sort direction follows
    the order in which the dates were given unless the caller set it.
"""

from __future__ import annotations

import logging
from typing import Any

from ..core.options import TimeRangeOptions, coerce_flag, coerce_int
from ..models.range_query import RangeQuery
from ..utils.dates import convert_date, date_to_ts, min_max_date

logger = logging.getLogger(__name__)


class RangeQueryPlanner:
    """Derives effective bounds and direction for time-indexed queries."""

    def plan(self, options: TimeRangeOptions) -> RangeQuery:
        """Resolve ``options`` into a RangeQuery.

        Rules:
            - ``min_ts``/``max_ts`` default to the start of the earlier date
              and the end of the later date, only when not supplied
            - ``min_ts``/``max_ts`` that are not numbers are kept as text and
              left for the backing store to reject
            - ``ascending`` unset with both dates given: ascending when the
              start date precedes the end date
            - ``ascending`` unset otherwise: True
            - ``ascending`` set: True for ``True``, ``"true"`` or ``"1"``
        """
        start_date = convert_date(options.start_date)
        end_date = convert_date(options.end_date, start_date)
        logger.debug(
            "range_dates_decoded",
            extra={
                "start_date": start_date.isoformat() if start_date else None,
                "end_date": end_date.isoformat() if end_date else None,
            },
        )

        min_date, max_date = min_max_date(start_date, end_date)

        min_ts = self.parse_bound(options.min_ts)
        max_ts = self.parse_bound(options.max_ts)
        if min_ts is None and min_date is not None:
            min_ts = date_to_ts(min_date)
        if max_ts is None and max_date is not None:
            max_ts = date_to_ts(max_date)

        ascending = self.resolve_ascending(options.ascending, start_date, end_date)
        return RangeQuery(min_ts=min_ts, max_ts=max_ts, ascending=ascending)

    @staticmethod
    def parse_bound(value: Any) -> int | str | None:
        """Parse an explicit bound; unparsable values are passed on as text.

        The backing store rejects a non-numeric bound with a validation
        error, which is how a bad ``minTS``/``maxTS`` reaches the caller.
        """
        if value is None:
            return None
        parsed = coerce_int(value)
        if parsed is not None:
            return parsed
        return value if isinstance(value, str) else str(value)

    @staticmethod
    def resolve_ascending(value: Any, start_date: Any, end_date: Any) -> bool:
        if value is None:
            if start_date is not None and end_date is not None:
                return start_date < end_date
            return True
        return coerce_flag(value)
