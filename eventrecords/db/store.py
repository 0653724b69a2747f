"""Whole-collection persistence for event records.

The store keeps one row per event keyed by id and only supports bulk
operations: replace everything, or read everything. Display order is owned
by the in-memory list in the repository, never by the table.
"""

import logging
from typing import Iterable, List, Optional

from sqlalchemy.exc import SQLAlchemyError

from ..models.event import Event, ValidationFailed
from ..models.stored_event import StoredEvent
from .db_core import Database, DatabaseError, StorageUnavailable, ReadFailed, WriteFailed, get_database
from .operations import with_retry

logger = logging.getLogger(__name__)

class EventStore:
    """Single-table event store backed by a `Database`."""

    def __init__(self, database: Optional[Database] = None):
        self.database = database or get_database()
        self._opened = False

    def open(self) -> 'EventStore':
        """
        Ensure the database and the events table exist.

        Safe to call repeatedly.

        Returns:
            EventStore: self

        Raises:
            StorageUnavailable: If the database cannot be reached or the table created
        """
        if self._opened:
            return self
        try:
            self.database.ensure_tables_exist()
        except (DatabaseError, SQLAlchemyError) as e:
            logger.error(f"Event store unavailable: {e}")
            raise StorageUnavailable(f"Cannot open event store: {e}") from e
        self._opened = True
        logger.info(f"Event store opened at {self.database.config.connection_url.split('@')[-1]}")
        return self

    def replace_all(self, records: Iterable[Event]) -> int:
        """
        Replace the table contents with `records`.

        The delete and all inserts run in one transaction, so readers see
        either the previous contents or the new ones. Transient failures
        retry the whole batch.

        Args:
            records: Events to store, keyed by their id

        Returns:
            int: Number of records written

        Raises:
            StorageUnavailable: If the store cannot be opened
            WriteFailed: If the batch could not be applied
        """
        self.open()
        batch = list(records)
        try:
            self._replace_all(batch)
        except (DatabaseError, SQLAlchemyError) as e:
            logger.error(f"Failed to persist {len(batch)} events: {e}")
            raise WriteFailed(f"Failed to save events: {e}") from e
        logger.debug(f"Persisted {len(batch)} events")
        return len(batch)

    @with_retry()
    def _replace_all(self, batch: List[Event]) -> None:
        with self.database.session() as session:
            session.query(StoredEvent).delete(synchronize_session=False)
            session.add_all([StoredEvent.from_event(event) for event in batch])

    def read_all(self) -> List[Event]:
        """
        Read every stored event.

        Rows whose payload can no longer be decoded are skipped with a warning.

        Returns:
            List[Event]: Stored events, in no particular order

        Raises:
            StorageUnavailable: If the store cannot be opened
            ReadFailed: If the table cannot be read
        """
        self.open()
        events: List[Event] = []
        try:
            with self.database.session() as session:
                for row in session.query(StoredEvent).all():
                    try:
                        events.append(row.to_event())
                    except ValidationFailed as e:
                        logger.warning(f"Skipping unreadable stored event {row.id}: {e}")
        except (DatabaseError, SQLAlchemyError) as e:
            logger.error(f"Failed to read events: {e}")
            raise ReadFailed(f"Failed to load events: {e}") from e
        return events

    def clear(self) -> int:
        """
        Delete every stored event.

        Returns:
            int: Number of rows removed

        Raises:
            WriteFailed: If the rows could not be deleted
        """
        self.open()
        try:
            with self.database.session() as session:
                count = session.query(StoredEvent).delete(synchronize_session=False)
        except (DatabaseError, SQLAlchemyError) as e:
            raise WriteFailed(f"Failed to clear events: {e}") from e
        logger.info(f"Cleared {count} events from the store")
        return count
