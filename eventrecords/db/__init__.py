"""Database package initialization.

This module exposes the public interface of the database package.
"""

from .db_core import (
    Database,
    DatabaseConfig,
    DatabaseError,
    ConnectionError,
    SessionError,
    StorageUnavailable,
    ReadFailed,
    WriteFailed,
    get_database
)
from .operations import with_retry
from .store import EventStore

__all__ = [
    # Core database classes
    'Database',
    'DatabaseConfig',
    'EventStore',

    # Exceptions
    'DatabaseError',
    'ConnectionError',
    'SessionError',
    'StorageUnavailable',
    'ReadFailed',
    'WriteFailed',

    # Default instance
    'get_database',

    # Utilities
    'with_retry',
]
