"""Unit tests for option coercion."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from lowfat.store.core import (
    FeaturedOptions,
    ListOptions,
    ScanOptions,
    TimeRangeOptions,
    TypeQueryOptions,
    coerce_flag,
    coerce_int,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [(True, True), ("true", True), ("1", True), (False, False), ("false", False),
     ("0", False), ("TRUE", False), (1, False), (None, False)],
)
def test_coerce_flag(value, expected):
    assert coerce_flag(value) is expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [(5, 5), ("5", 5), (" 12 ", 12), ("12px", 12), ("-3", -3), (4.9, 4),
     (Decimal("7"), 7), ("number", None), ("", None), (None, None), (True, None),
     (float("nan"), None)],
)
def test_coerce_int(value, expected):
    assert coerce_int(value) == expected


def test_list_options_defaults():
    opts = ListOptions.build()
    assert (opts.start, opts.limit, opts.random, opts.full) == (0, 5, False, False)
    assert opts.ids is None
    assert opts.list_id is None


def test_list_options_from_transport_strings():
    opts = ListOptions.build(
        {"start": "2", "limit": "3", "random": "1", "full": "true", "list": "l"}
    )
    assert (opts.start, opts.limit, opts.random, opts.full) == (2, 3, True, True)
    assert opts.list_id == "l"


def test_invalid_integer_falls_back_to_default():
    assert ListOptions.build({"limit": "many"}).limit == 5
    assert ScanOptions.build({"pageSize": "x"}, page_size=1).page_size == 1


def test_caller_options_override_call_site_defaults():
    opts = ScanOptions.build({"pageSize": "25", "throttle": 0}, page_size=1, throttle=1000)
    assert opts.page_size == 25
    assert opts.throttle == 0


def test_snake_case_names_are_accepted():
    opts = TimeRangeOptions.build({"min_ts": "10", "end_date": "2017-08-09"})
    assert opts.min_ts == "10"
    assert opts.end_date == "2017-08-09"


def test_time_range_bounds_are_kept_as_given():
    opts = TimeRangeOptions.build({"minTS": "number", "maxTS": 5, "limit": "x"})
    assert opts.min_ts == "number"
    assert opts.max_ts == 5
    assert opts.limit == 10


def test_time_range_ascending_stays_tri_state():
    assert TimeRangeOptions.build().ascending is None
    assert TimeRangeOptions.build({"ascending": "false"}).ascending == "false"


def test_featured_defaults_and_coercion():
    assert FeaturedOptions.build().ascending is False
    opts = FeaturedOptions.build({"limit": "4", "ascending": "true"})
    assert (opts.limit, opts.ascending) == (4, True)


def test_type_query_defaults():
    opts = TypeQueryOptions.build()
    assert (opts.page_size, opts.throttle, opts.ascending, opts.prefix) == (10, 1000, True, None)


def test_unknown_options_are_ignored():
    assert ListOptions.build({"unknown": 1}).limit == 5


def test_options_are_frozen():
    opts = ListOptions.build()
    with pytest.raises(ValidationError):
        opts.limit = 9
