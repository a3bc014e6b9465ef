"""Unit tests for the in-memory backing store."""

import pytest

from lowfat.store import BackendValidationError, Family, IndexName, InMemoryStore, KeyCondition
from lowfat.store.config import StoreConfig


def brief(type_: str, iid: str, **fields) -> dict:
    return {"Type": type_, "IID": iid, **fields}


@pytest.fixture
def memory() -> InMemoryStore:
    store = InMemoryStore(StoreConfig(table_prefix="Test_"))
    store.load(
        content=[{"ID": "a", "Data": {}}, {"ID": "b", "Data": {}}, {"ID": "c", "Data": {}}],
        brief=[
            brief("t", "3", TS=30),
            brief("t", "1", TS=10, FeatureDate=5),
            brief("t", "2"),
            brief("u", "1", TS=20),
        ],
    )
    return store


class TestPointReads:
    @pytest.mark.asyncio
    async def test_get_one(self, memory):
        response = await memory.get_one(Family.CONTENT, {"ID": "b"})
        assert response.item["ID"] == "b"
        assert response.consumed_capacity["TableName"] == "Test_Content"

    @pytest.mark.asyncio
    async def test_get_one_missing(self, memory):
        response = await memory.get_one(Family.BRIEF, {"Type": "t", "IID": "9"})
        assert response.item is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "key",
        [{"ID": ""}, {"ID": None}, {"ID": 5}, {"Type": "t", "IID": "1"}, {}],
    )
    async def test_get_one_rejects_malformed_keys(self, memory, key):
        with pytest.raises(BackendValidationError) as exc_info:
            await memory.get_one(Family.CONTENT, key)
        assert exc_info.value.code == "ValidationException"

    def test_put_rejects_items_without_key(self, memory):
        with pytest.raises(BackendValidationError):
            memory.put_brief({"Type": "t"})


class TestBatchGet:
    @pytest.mark.asyncio
    async def test_returns_hits_and_capacity(self, memory):
        response = await memory.batch_get(Family.CONTENT, [{"ID": "c"}, {"ID": "z"}, {"ID": "a"}])
        assert sorted(item["ID"] for item in response.items) == ["a", "c"]
        assert response.consumed_capacity == [
            {"TableName": "Test_Content", "CapacityUnits": 1.5}
        ]
        assert response.unprocessed_keys == {}

    @pytest.mark.asyncio
    async def test_rejects_duplicate_keys(self, memory):
        with pytest.raises(BackendValidationError):
            await memory.batch_get(Family.CONTENT, [{"ID": "a"}, {"ID": "a"}])


class TestPagedScan:
    @pytest.mark.asyncio
    async def test_pages_follow_cursor(self, memory):
        first = await memory.paged_scan(Family.CONTENT, page_size=2)
        assert [item["ID"] for item in first.items] == ["a", "b"]
        assert first.next_cursor == {"ID": "b"}

        second = await memory.paged_scan(Family.CONTENT, page_size=2, cursor=first.next_cursor)
        assert [item["ID"] for item in second.items] == ["c"]
        assert second.next_cursor is None
        assert second.stats.count == 1

    @pytest.mark.asyncio
    async def test_exact_fit_has_no_cursor(self, memory):
        page = await memory.paged_scan(Family.CONTENT, page_size=3)
        assert page.next_cursor is None

    @pytest.mark.asyncio
    async def test_empty_table(self):
        page = await InMemoryStore().paged_scan(Family.BRIEF, page_size=5)
        assert page.items == []
        assert page.next_cursor is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("page_size", [0, -1, "5"])
    async def test_rejects_invalid_page_size(self, memory, page_size):
        with pytest.raises(BackendValidationError):
            await memory.paged_scan(Family.CONTENT, page_size=page_size)

    @pytest.mark.asyncio
    async def test_rejects_unknown_cursor(self, memory):
        with pytest.raises(BackendValidationError):
            await memory.paged_scan(Family.CONTENT, page_size=1, cursor={"ID": "nope"})


class TestPagedQuery:
    @pytest.mark.asyncio
    async def test_partition_in_sort_key_order(self, memory):
        page = await memory.paged_query(Family.BRIEF, "t", page_size=10)
        assert [item["IID"] for item in page.items] == ["1", "2", "3"]

    @pytest.mark.asyncio
    async def test_descending(self, memory):
        page = await memory.paged_query(Family.BRIEF, "t", page_size=10, ascending=False)
        assert [item["IID"] for item in page.items] == ["3", "2", "1"]

    @pytest.mark.asyncio
    async def test_index_is_sparse(self, memory):
        page = await memory.paged_query(
            Family.BRIEF, "t", index=IndexName.TYPE_TS, page_size=10
        )
        assert [item["IID"] for item in page.items] == ["1", "3"]

        featured = await memory.paged_query(
            Family.BRIEF, "t", index=IndexName.TYPE_FEATURED, page_size=10
        )
        assert [item["IID"] for item in featured.items] == ["1"]

    @pytest.mark.asyncio
    async def test_range_condition(self, memory):
        page = await memory.paged_query(
            Family.BRIEF,
            "t",
            index=IndexName.TYPE_TS,
            condition=KeyCondition(attribute="TS", lower=15),
            page_size=10,
        )
        assert [item["IID"] for item in page.items] == ["3"]

    @pytest.mark.asyncio
    async def test_prefix_condition(self):
        store = InMemoryStore()
        store.load(brief=[brief("t", "id1.1"), brief("t", "id2.1"), brief("t", "id2.2")])
        page = await store.paged_query(
            Family.BRIEF,
            "t",
            condition=KeyCondition(attribute="IID", prefix="id2."),
            page_size=10,
        )
        assert [item["IID"] for item in page.items] == ["id2.1", "id2.2"]

    @pytest.mark.asyncio
    async def test_cursor_continues_in_index_order(self, memory):
        first = await memory.paged_query(
            Family.BRIEF, "t", index=IndexName.TYPE_TS, page_size=1, ascending=False
        )
        assert first.next_cursor == {"Type": "t", "IID": "3"}
        second = await memory.paged_query(
            Family.BRIEF,
            "t",
            index=IndexName.TYPE_TS,
            page_size=1,
            ascending=False,
            cursor=first.next_cursor,
        )
        assert [item["IID"] for item in second.items] == ["1"]
        assert second.next_cursor is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("partition", ["", None, 7])
    async def test_rejects_invalid_partition(self, memory, partition):
        with pytest.raises(BackendValidationError):
            await memory.paged_query(Family.BRIEF, partition, page_size=10)

    @pytest.mark.asyncio
    async def test_rejects_non_numeric_bound(self, memory):
        with pytest.raises(BackendValidationError):
            await memory.paged_query(
                Family.BRIEF,
                "t",
                index=IndexName.TYPE_TS,
                condition=KeyCondition(attribute="TS", lower="number"),
                page_size=10,
            )
