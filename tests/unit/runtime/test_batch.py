"""Unit tests for order-preserving batch fetches."""

import pytest

from lowfat.store import BackendValidationError, BatchFetcher, Family, InMemoryStore


class RecordingStore(InMemoryStore):
    def __init__(self) -> None:
        super().__init__()
        self.batch_calls: list[list[dict]] = []

    async def batch_get(self, family, keys):
        self.batch_calls.append(list(keys))
        return await super().batch_get(family, keys)


@pytest.fixture
def recording() -> RecordingStore:
    store = RecordingStore()
    store.load(
        content=[{"ID": "a", "Data": {}}, {"ID": "b", "Data": {}}],
        brief=[{"Type": "cat", "IID": "2"}, {"Type": "cat", "IID": "3"}],
    )
    return store


@pytest.mark.asyncio
async def test_duplicates_are_preserved_in_caller_order(recording):
    result = await BatchFetcher(recording, Family.CONTENT).fetch(["a", "b", "a"])

    assert [item["ID"] for item in result.items] == ["a", "b", "a"]
    assert result.items[0] is result.items[2]
    assert recording.batch_calls == [[{"ID": "a"}, {"ID": "b"}]]


@pytest.mark.asyncio
async def test_missing_keys_are_dropped(recording):
    result = await BatchFetcher(recording, Family.CONTENT).fetch(["a", "missing"])
    assert [item["ID"] for item in result.items] == ["a"]


@pytest.mark.asyncio
async def test_only_missing_keys_returns_empty(recording):
    result = await BatchFetcher(recording, Family.CONTENT).fetch(["x", "y"])
    assert result.items == []


@pytest.mark.asyncio
@pytest.mark.parametrize("keys", [[], None])
async def test_empty_keys_skip_backend(recording, keys):
    result = await BatchFetcher(recording, Family.CONTENT).fetch(keys)

    assert result.items == []
    assert recording.batch_calls == []


@pytest.mark.asyncio
async def test_brief_keys_use_partition(recording):
    result = await BatchFetcher(recording, Family.BRIEF, partition="cat").fetch(["3", "2", "3"])

    assert [item["IID"] for item in result.items] == ["3", "2", "3"]
    assert recording.batch_calls == [[{"Type": "cat", "IID": "3"}, {"Type": "cat", "IID": "2"}]]


@pytest.mark.asyncio
async def test_capacity_metadata_is_surfaced(recording):
    result = await BatchFetcher(recording, Family.CONTENT).fetch(["a"])

    assert result.consumed_capacity[0]["TableName"] == "Dev_Content"
    assert result.unprocessed_keys == {}


@pytest.mark.asyncio
async def test_backend_errors_propagate(recording):
    with pytest.raises(BackendValidationError):
        await BatchFetcher(recording, Family.CONTENT).fetch([1, 2])


def test_brief_family_requires_partition(recording):
    with pytest.raises(ValueError):
        BatchFetcher(recording, Family.BRIEF)
