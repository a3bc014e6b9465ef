"""Unit tests for filter expression parsing."""

import pytest

from lowfat.store.core import FilterAction
from lowfat.store.filters import parse
from lowfat.store.models import Filter


@pytest.mark.parametrize("expression", ["", None, ";", " ; ;  "])
def test_parse_empty_expressions(expression):
    """Empty, None and blank-only expressions yield no filters."""
    assert parse(expression) == []


def test_parse_values_and_remove_clause():
    filters = parse("a:1,2;-b")

    assert filters == [
        Filter(key="a", values=("1", "2"), action=FilterAction.KEEP),
        Filter(key="b", action=FilterAction.REMOVE),
    ]
    assert filters[1].values is None


def test_parse_documented_example():
    filters = parse("animalStatus:Available,Hold;-animalColor:Black;thumb")

    assert [(f.key, f.values, f.action) for f in filters] == [
        ("animalStatus", ("Available", "Hold"), FilterAction.KEEP),
        ("animalColor", ("Black",), FilterAction.REMOVE),
        ("thumb", None, FilterAction.KEEP),
    ]


def test_parse_plus_sign_is_keep():
    (flt,) = parse("+special:y")
    assert flt.key == "special"
    assert flt.action is FilterAction.KEEP


def test_parse_repeated_keys_are_not_merged():
    """Same key twice produces two independent filters in order."""
    filters = parse("IID:0,2;-IID:1")

    assert len(filters) == 2
    assert filters[0].values == ("0", "2")
    assert filters[1].values == ("1",)
    assert filters[1].action is FilterAction.REMOVE


def test_parse_values_keep_order_and_duplicates():
    (flt,) = parse("k:b,a,b")
    assert flt.values == ("b", "a", "b")


def test_parse_splits_on_first_colon_only():
    (flt,) = parse("time:10:30,11:00")
    assert flt.key == "time"
    assert flt.values == ("10:30", "11:00")


def test_parse_empty_value_list():
    (flt,) = parse("name:")
    assert flt.values == ("",)


@pytest.mark.parametrize("expression", ["-", "+", ":x", "-:y"])
def test_parse_drops_clauses_without_key(expression):
    assert parse(expression) == []


def test_parse_skips_blank_clauses_between_valid_ones():
    filters = parse("a;; ;-b ")
    assert [f.key for f in filters] == ["a", "b"]
    assert filters[1].action is FilterAction.REMOVE


def test_filter_str_round_trips_expression():
    assert [str(f) for f in parse("a:1,2;-b;c")] == ["a:1,2", "-b", "c"]
