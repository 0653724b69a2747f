"""Shared fixtures: an isolated SQLite database per test."""

import pytest

from eventrecords.db import Database, DatabaseConfig, EventStore
from eventrecords.models.event import Event, MediaItem
from eventrecords.repository import EventRepository

EDITOR_HEADERS = {'X-User-Role': 'edit', 'X-Username': 'admin'}
VIEWER_HEADERS = {'X-User-Role': 'view', 'X-Username': 'guest'}

def build_event(**overrides) -> Event:
    defaults = dict(
        id=1,
        title="Code Sprint",
        date="2024-02-05T09:00:00",
        category="Technical",
        coordinator="Dr. Rao",
        end_date=None,
        event_type="Hackathon",
        department="Computer Science",
        venue="Main Auditorium",
        team_members=["Asha", "Vikram"],
        resource_persons=["Prof. Iyer"],
        participants_count=120,
        external_participants=15,
        sponsored_by="Alumni Association",
        financial_assistance=5000.0,
        total_expenses=4200.5,
        description="Overnight coding event",
        media=[MediaItem(type="image/png", name="poster.png", url="https://files.example/poster.png")],
    )
    defaults.update(overrides)
    return Event(**defaults)

@pytest.fixture
def make_event():
    return build_event

@pytest.fixture
def database(tmp_path):
    db = Database(DatabaseConfig(sqlite_path=tmp_path / 'events.db'))
    yield db
    db.dispose()

@pytest.fixture
def store(database):
    return EventStore(database).open()

@pytest.fixture
def repository(store):
    repo = EventRepository(store)
    repo.load()
    yield repo
    repo.close()
