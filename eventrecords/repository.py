"""In-memory event repository kept in sync with the event store.

The repository owns the authoritative list of events for the running
process. Mutations apply to memory and notify subscribers before returning;
persistence of the resulting snapshot is handed to a single background
worker, so writes reach the store in the order they were issued and the
store always converges to the latest snapshot.
"""

import copy
import logging
from concurrent.futures import Future, ThreadPoolExecutor, wait
from enum import Enum
from typing import Callable, List, Optional, Tuple

from .db import DatabaseError, EventStore
from .models.event import Event
from .notifications import NotificationCenter

logger = logging.getLogger(__name__)

Snapshot = Tuple[Event, ...]
Subscriber = Callable[[Snapshot], None]

class RepositoryState(Enum):
    """Lifecycle of the repository."""
    UNINITIALIZED = 'uninitialized'
    LOADING = 'loading'
    READY = 'ready'

class RepositoryNotReady(RuntimeError):
    """Raised when a mutation is attempted before `load()`."""
    pass

class EventRepository:
    """Authoritative in-memory list of events with subscriptions."""

    def __init__(
        self,
        store: EventStore,
        notifications: Optional[NotificationCenter] = None
    ):
        self.store = store
        self.notifications = notifications or NotificationCenter()
        self._events: List[Event] = []
        self._subscribers: List[Subscriber] = []
        self._state = RepositoryState.UNINITIALIZED
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix='event-persist')
        self._last_persist: Optional[Future] = None

    @property
    def state(self) -> RepositoryState:
        return self._state

    @property
    def events(self) -> Snapshot:
        """Current events, in display order."""
        return tuple(self._events)

    def get(self, event_id: int) -> Optional[Event]:
        """Return the event with `event_id`, or None."""
        index = self._index_of(event_id)
        return None if index is None else self._events[index]

    def load(self) -> Snapshot:
        """
        Load events from the store exactly once.

        A store failure leaves the repository ready with an empty list and
        raises an error notification instead of an exception.

        Returns:
            Snapshot: The events now held in memory
        """
        if self._state is not RepositoryState.UNINITIALIZED:
            return self.events

        self._state = RepositoryState.LOADING
        try:
            loaded = self.store.read_all()
            logger.info(f"Loaded {len(loaded)} events from the store")
        except DatabaseError as e:
            logger.error(f"Error loading events: {e}")
            self.notifications.error("Failed to load events")
            loaded = []

        self._events = sorted(loaded, key=lambda event: event.id)
        self._state = RepositoryState.READY
        self._publish()
        return self.events

    def add(self, event: Event) -> Event:
        """
        Append a new event. Its id must already be allocated.

        Returns:
            Event: The stored copy of the event
        """
        self._require_ready()
        stored = copy.deepcopy(event)
        self._events.append(stored)
        logger.info(f"Added event {stored.id}: {stored.title}")
        self._after_mutation("Event added successfully")
        return stored

    def update(self, event: Event) -> bool:
        """
        Replace the event with the same id, keeping its position.

        Unknown ids leave the list untouched.

        Returns:
            bool: True if an event was replaced
        """
        self._require_ready()
        index = self._index_of(event.id)
        if index is None:
            logger.info(f"Ignoring update for unknown event {event.id}")
            return False
        self._events[index] = copy.deepcopy(event)
        logger.info(f"Updated event {event.id}: {event.title}")
        self._after_mutation("Event updated successfully")
        return True

    def delete(self, event_id: int) -> bool:
        """
        Remove the event with `event_id` if present.

        Returns:
            bool: True if an event was removed
        """
        self._require_ready()
        index = self._index_of(event_id)
        if index is None:
            logger.info(f"Ignoring delete for unknown event {event_id}")
            return False
        removed = self._events.pop(index)
        logger.info(f"Deleted event {removed.id}: {removed.title}")
        self._after_mutation("Event deleted successfully")
        return True

    def subscribe(self, subscriber: Subscriber) -> Callable[[], None]:
        """
        Register a callback receiving every post-mutation snapshot.

        Returns:
            Callable: Function that removes the subscription
        """
        self._subscribers.append(subscriber)

        def unsubscribe() -> None:
            if subscriber in self._subscribers:
                self._subscribers.remove(subscriber)

        return unsubscribe

    def flush(self, timeout: Optional[float] = None) -> None:
        """Block until every scheduled persist has finished."""
        pending = self._last_persist
        if pending is not None:
            wait([pending], timeout=timeout)

    def close(self) -> None:
        """Finish pending persistence and stop the worker."""
        self.flush()
        self._executor.shutdown(wait=True)

    def _require_ready(self) -> None:
        if self._state is not RepositoryState.READY:
            raise RepositoryNotReady("Events have not been loaded yet")

    def _index_of(self, event_id: int) -> Optional[int]:
        for index, event in enumerate(self._events):
            if event.id == event_id:
                return index
        return None

    def _after_mutation(self, message: str) -> None:
        snapshot = self.events
        self._publish(snapshot)
        self._schedule_persist(snapshot)
        self.notifications.success(message)

    def _publish(self, snapshot: Optional[Snapshot] = None) -> None:
        snapshot = self.events if snapshot is None else snapshot
        for subscriber in list(self._subscribers):
            try:
                subscriber(snapshot)
            except Exception as e:
                logger.error(f"Event subscriber failed: {e}")

    def _schedule_persist(self, snapshot: Snapshot) -> None:
        # An empty list is never written, so the initial empty state cannot wipe the store.
        if not snapshot:
            logger.debug("Skipping persistence of empty event list")
            return
        self._last_persist = self._executor.submit(self._persist, snapshot)

    def _persist(self, snapshot: Snapshot) -> None:
        try:
            self.store.replace_all(snapshot)
        except DatabaseError as e:
            logger.error(f"Error saving events: {e}")
            self.notifications.error("Failed to save events")
