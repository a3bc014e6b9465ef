"""Shared fixtures: an in-memory store seeded with cat and dog-update items."""

from __future__ import annotations

import random

import pytest

from lowfat.store import ContentStore, InMemoryStore

CAT_ROWS = [
    ("0", "Marigold", "Senior", "y", 1502900000000),
    ("1", "Tom", "Adult", "n", 1502800000000),
    ("2", "Greta", "Young", "n", 1502727027330),
    ("3", "Hagrid", "Adult", None, None),
    ("4", "Luna", "Baby", "y", 1502600000000),
    ("5", "Oscar", "Senior", "n", 1502500000000),
]

DOG_UPDATES = [
    ("id1.45", 1501000000000),
    ("id1.46", 1501100000000),
    ("id2.47", 1501863044192),
    ("id2.48", 1501949438656),
    ("id2.43", 1502200000000),
]

FEATURED_NOW = 1502727027330


def cat_brief(iid: str, name: str, age: str, special: str | None, feature_date: int | None) -> dict:
    item = {"Type": "cat", "IID": iid, "name": name, "age": age, "link": "article-profile.html"}
    if special is not None:
        item["special"] = special
    if feature_date is not None:
        item["FeatureDate"] = feature_date
    return item


def cat_content(iid: str, name: str, age: str, special: str | None) -> dict:
    data = {"Type": "cat", "IID": iid, "name": name, "age": age, "tags": ["cat", age.lower()]}
    if special is not None:
        data["special"] = special
    return {
        "ID": f"cat#{iid}",
        "Data": data,
        "CreatedAt": "2018-02-19T02:35:05.620Z",
        "CreatedBy": "fixture",
    }


def build_backend() -> InMemoryStore:
    backend = InMemoryStore()
    backend.load(
        content=[cat_content(iid, name, age, special) for iid, name, age, special, _ in CAT_ROWS]
        + [
            {
                "ID": "event#1",
                "Data": {
                    "Type": "event",
                    "title": "Event Name #1",
                    "date": "2017-10-03T16:00:00.000Z",
                },
                "CreatedAt": "2018-02-19T02:35:05.620Z",
                "CreatedBy": "fixture",
            },
            {
                "ID": "list#cats",
                "Data": {"Type": "list", "cat": ["0", "1", "2", "3"]},
                "CreatedAt": "2018-02-19T02:35:05.620Z",
                "CreatedBy": "fixture",
            },
        ],
        brief=[cat_brief(*row) for row in CAT_ROWS]
        + [{"Type": "dog-update", "IID": iid, "TS": ts} for iid, ts in DOG_UPDATES],
    )
    return backend


@pytest.fixture
def backend() -> InMemoryStore:
    return build_backend()


@pytest.fixture
def store(backend: InMemoryStore) -> ContentStore:
    return ContentStore(backend, rng=random.Random(7))
