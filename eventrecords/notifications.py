"""Transient user-facing notifications.

Mutations and background persistence report their outcome here instead of
raising to the caller. Clients poll the recent history or subscribe.
"""

import logging
import threading
from collections import deque
from dataclasses import dataclass, field, asdict
from datetime import datetime, timezone
from typing import Callable, Deque, Dict, Any, List

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class Notification:
    """
    A toast-style message.

    Fields:
        level: 'success' or 'error'
        title: Short heading
        message: Human-readable description
        created_at: When the notification was raised (UTC)
    """
    level: str
    title: str
    message: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        data = asdict(self)
        data['created_at'] = self.created_at.isoformat()
        return data

Listener = Callable[[Notification], None]

class NotificationCenter:
    """Bounded notification history with listeners.

    Published from the request path and from the persistence worker, hence the lock.
    """

    def __init__(self, history_size: int = 50):
        self._history: Deque[Notification] = deque(maxlen=history_size)
        self._listeners: List[Listener] = []
        self._lock = threading.Lock()

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a function that removes it."""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def publish(self, notification: Notification) -> Notification:
        with self._lock:
            self._history.append(notification)
            listeners = list(self._listeners)
        for listener in listeners:
            try:
                listener(notification)
            except Exception as e:
                logger.error(f"Notification listener failed: {e}")
        return notification

    def success(self, message: str, title: str = "Success") -> Notification:
        return self.publish(Notification('success', title, message))

    def error(self, message: str, title: str = "Error") -> Notification:
        return self.publish(Notification('error', title, message))

    def recent(self) -> List[Notification]:
        """Notifications in the order they were raised, oldest first."""
        with self._lock:
            return list(self._history)
