"""
Tests for eventrecords.db.store — whole-collection event persistence.
"""

import pytest

from eventrecords.db import Database, DatabaseConfig, EventStore, StorageUnavailable, WriteFailed
from eventrecords.models.stored_event import StoredEvent

def _by_id(events):
    return {event.id: event for event in events}

class TestOpen:
    def test_open_is_idempotent(self, database):
        store = EventStore(database)
        assert store.open() is store
        assert store.open() is store
        assert store.read_all() == []

    def test_unusable_location_is_unavailable(self, tmp_path):
        # A directory cannot be opened as a SQLite database file
        db = Database(DatabaseConfig(sqlite_path=tmp_path))
        with pytest.raises(StorageUnavailable):
            EventStore(db).open()
        db.dispose()

class TestReplaceAndRead:
    def test_round_trip_as_set(self, store, make_event):
        records = [make_event(id=3, title="C"), make_event(id=1, title="A"), make_event(id=2, title="B")]
        assert store.replace_all(records) == 3
        assert _by_id(store.read_all()) == _by_id(records)

    def test_replace_supersedes_previous_contents(self, store, make_event):
        store.replace_all([make_event(id=1), make_event(id=2)])
        store.replace_all([make_event(id=2, title="Renamed"), make_event(id=5)])
        stored = _by_id(store.read_all())
        assert set(stored) == {2, 5}
        assert stored[2].title == "Renamed"

    def test_replace_with_empty_clears(self, store, make_event):
        store.replace_all([make_event(id=1)])
        store.replace_all([])
        assert store.read_all() == []

    def test_failed_batch_leaves_previous_contents(self, store, make_event):
        store.replace_all([make_event(id=1, title="Kept")])
        with pytest.raises(WriteFailed):
            store.replace_all([make_event(id=2), make_event(id=2, title="Duplicate")])
        assert [event.title for event in store.read_all()] == ["Kept"]

    def test_persists_across_database_instances(self, tmp_path, make_event):
        path = tmp_path / 'events.db'
        first = Database(DatabaseConfig(sqlite_path=path))
        EventStore(first).replace_all([make_event(id=9)])
        first.dispose()

        second = Database(DatabaseConfig(sqlite_path=path))
        assert [event.id for event in EventStore(second).read_all()] == [9]
        second.dispose()

    def test_minimal_rows_load_and_invalid_rows_are_skipped(self, store, database, make_event):
        store.replace_all([make_event(id=1)])
        with database.session() as session:
            session.add(StoredEvent(id=2, payload={"title": "Old shape"}))
            session.add(StoredEvent(id=-1, payload={"title": "Invalid id"}))
        stored = _by_id(store.read_all())
        assert sorted(stored) == [1, 2]
        assert stored[2].title == "Old shape"
        assert stored[2].media == []

    def test_clear(self, store, make_event):
        store.replace_all([make_event(id=1), make_event(id=2)])
        assert store.clear() == 2
        assert store.read_all() == []
