"""
Record store tests
"""

from typing import Optional

import pytest
from pydantic import BaseModel

from campus_shared.utils.storage import InMemoryRecordStore, parse_record_id


class Note(BaseModel):
    id: Optional[int] = None
    title: str
    owner_id: int


@pytest.fixture
def store() -> InMemoryRecordStore:
    return InMemoryRecordStore(Note, owner_field="owner_id")


class TestParseRecordId:
    @pytest.mark.parametrize("raw,expected", [("42", 42), ("007", 7), ("-3", -3), (5, 5)])
    def test_plain_integers(self, raw, expected):
        assert parse_record_id(raw) == expected

    @pytest.mark.parametrize("raw", ["abc", "1_0", "+5", " 5", "1.0", "\u0661", "-", "", None, True, 1.0])
    def test_everything_else_is_none(self, raw):
        assert parse_record_id(raw) is None


class TestInMemoryRecordStore:
    async def test_insert_assigns_increasing_ids(self, store):
        first = await store.insert(Note(title="a", owner_id=1))
        second = await store.insert(Note(title="b", owner_id=1))
        assert (first.id, second.id) == (1, 2)
        assert await store.count() == 2

    async def test_ids_are_not_reused_after_delete(self, store):
        first = await store.insert(Note(title="a", owner_id=1))
        assert await store.delete(first.id)
        second = await store.insert(Note(title="b", owner_id=1))
        assert second.id == 2

    async def test_find_by_owner_scopes_records(self, store):
        await store.insert(Note(title="a", owner_id=1))
        await store.insert(Note(title="b", owner_id=2))
        await store.insert(Note(title="c", owner_id=1))

        titles = [note.title for note in await store.find_by_owner(1)]
        assert titles == ["a", "c"]
        assert await store.find_by_owner(3) == []

    async def test_find_one(self, store):
        await store.insert(Note(title="a", owner_id=1))
        assert (await store.find_one(title="a")).owner_id == 1
        assert await store.find_one(title="a", owner_id=2) is None

    async def test_returned_records_are_copies(self, store):
        note = await store.insert(Note(title="a", owner_id=1))
        note.title = "changed"
        assert (await store.find_by_id(note.id)).title == "a"

    async def test_update(self, store):
        note = await store.insert(Note(title="a", owner_id=1))
        updated = await store.update(note.id, title="b")
        assert updated.title == "b"
        assert (await store.find_by_id(note.id)).title == "b"
        assert await store.update(99, title="x") is None

    async def test_delete_missing(self, store):
        assert await store.delete(42) is False

    async def test_find_by_owner_requires_owner_field(self):
        store = InMemoryRecordStore(Note)
        with pytest.raises(TypeError):
            await store.find_by_owner(1)
