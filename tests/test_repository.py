"""
Tests for eventrecords.repository — in-memory events synced to the store.
"""

import threading

import pytest

from eventrecords.db import EventStore, ReadFailed, WriteFailed
from eventrecords.repository import EventRepository, RepositoryNotReady, RepositoryState

class FailingStore(EventStore):
    """Store whose reads and/or writes always fail."""

    def __init__(self, store, fail_read=False, fail_write=False):
        super().__init__(store.database)
        self.fail_read = fail_read
        self.fail_write = fail_write

    def read_all(self):
        if self.fail_read:
            raise ReadFailed("disk on fire")
        return super().read_all()

    def replace_all(self, records):
        if self.fail_write:
            raise WriteFailed("disk full")
        return super().replace_all(records)

def _ids(events):
    return [event.id for event in events]

class TestLoad:
    def test_starts_uninitialized(self, store):
        repo = EventRepository(store)
        assert repo.state is RepositoryState.UNINITIALIZED
        with pytest.raises(RepositoryNotReady):
            repo.delete(1)
        repo.close()

    def test_load_empty_store(self, repository):
        assert repository.state is RepositoryState.READY
        assert repository.events == ()

    def test_load_reads_store_once(self, store, make_event):
        store.replace_all([make_event(id=2), make_event(id=1)])
        repo = EventRepository(store)
        assert _ids(repo.load()) == [1, 2]

        store.replace_all([make_event(id=7)])
        assert _ids(repo.load()) == [1, 2]
        repo.close()

    def test_load_failure_degrades_to_empty(self, store, make_event):
        store.replace_all([make_event(id=1)])
        repo = EventRepository(FailingStore(store, fail_read=True))
        assert repo.load() == ()
        assert repo.state is RepositoryState.READY
        errors = [n for n in repo.notifications.recent() if n.level == 'error']
        assert [n.message for n in errors] == ["Failed to load events"]
        repo.close()

    def test_load_notifies_subscribers(self, store, make_event):
        store.replace_all([make_event(id=1)])
        repo = EventRepository(store)
        seen = []
        repo.subscribe(seen.append)
        repo.load()
        assert [_ids(snapshot) for snapshot in seen] == [[1]]
        repo.close()

class TestMutations:
    def test_sequence_applies_in_order(self, repository, make_event):
        repository.add(make_event(id=1, title="A"))
        repository.add(make_event(id=2, title="B"))
        repository.add(make_event(id=3, title="C"))
        repository.update(make_event(id=2, title="B2"))
        repository.delete(1)
        repository.add(make_event(id=4, title="D"))

        assert [(e.id, e.title) for e in repository.events] == [(2, "B2"), (3, "C"), (4, "D")]

    def test_update_keeps_position(self, repository, make_event):
        for event_id in (1, 2, 3):
            repository.add(make_event(id=event_id))
        assert repository.update(make_event(id=2, venue="Seminar Hall"))
        assert _ids(repository.events) == [1, 2, 3]
        assert repository.get(2).venue == "Seminar Hall"

    def test_update_unknown_id_is_noop(self, repository, make_event):
        repository.add(make_event(id=1))
        before = repository.events
        seen = []
        repository.subscribe(seen.append)
        assert repository.update(make_event(id=99)) is False
        assert repository.events == before
        assert seen == []

    def test_delete_unknown_id_is_noop(self, repository, make_event):
        repository.add(make_event(id=1))
        assert repository.delete(42) is False
        assert _ids(repository.events) == [1]

    def test_add_stores_a_copy(self, repository, make_event):
        event = make_event(id=1)
        repository.add(event)
        event.title = "Changed by caller"
        assert repository.get(1).title == "Code Sprint"

    def test_success_notifications(self, repository, make_event):
        repository.add(make_event(id=1))
        repository.update(make_event(id=1))
        repository.delete(1)
        assert [n.message for n in repository.notifications.recent()] == [
            "Event added successfully",
            "Event updated successfully",
            "Event deleted successfully",
        ]

class TestSubscriptions:
    def test_subscribers_see_snapshot_before_return(self, repository, make_event):
        seen = []
        repository.subscribe(lambda snapshot: seen.append(_ids(snapshot)))
        repository.add(make_event(id=1))
        assert seen == [[1]]
        repository.add(make_event(id=2))
        assert seen == [[1], [1, 2]]

    def test_unsubscribe(self, repository, make_event):
        seen = []
        unsubscribe = repository.subscribe(seen.append)
        repository.add(make_event(id=1))
        unsubscribe()
        repository.add(make_event(id=2))
        assert len(seen) == 1

    def test_failing_subscriber_does_not_block_others(self, repository, make_event):
        def broken(snapshot):
            raise RuntimeError("render failed")

        seen = []
        repository.subscribe(broken)
        repository.subscribe(seen.append)
        repository.add(make_event(id=1))
        assert len(seen) == 1

class TestPersistence:
    def test_store_converges_to_latest_snapshot(self, repository, store, make_event):
        for event_id in range(1, 21):
            repository.add(make_event(id=event_id))
        for event_id in range(1, 21, 2):
            repository.delete(event_id)
        repository.update(make_event(id=2, title="Final"))
        repository.flush()

        stored = {event.id: event for event in store.read_all()}
        assert sorted(stored) == list(range(2, 21, 2))
        assert stored[2].title == "Final"

    def test_persistence_runs_off_the_calling_thread(self, store, make_event):
        calls = []

        class RecordingStore(EventStore):
            def replace_all(self, records):
                calls.append(threading.current_thread().name)
                return super().replace_all(records)

        repo = EventRepository(RecordingStore(store.database))
        repo.load()
        repo.add(make_event(id=1))
        repo.flush()
        repo.close()
        assert len(calls) == 1
        assert calls[0] != threading.current_thread().name

    def test_empty_list_is_never_persisted(self, repository, store, make_event):
        repository.add(make_event(id=1))
        repository.flush()
        repository.delete(1)
        repository.flush()

        assert repository.events == ()
        assert _ids(store.read_all()) == [1]

    def test_write_failure_keeps_memory_and_notifies(self, store, make_event):
        repo = EventRepository(FailingStore(store, fail_write=True))
        repo.load()
        repo.add(make_event(id=1))
        repo.flush()

        assert _ids(repo.events) == [1]
        errors = [n.message for n in repo.notifications.recent() if n.level == 'error']
        assert errors == ["Failed to save events"]
        repo.close()
