"""Routes package initialization."""

from . import (
    categories,
    dashboard,
    events,
    health,
    media,
    notifications,
    reports,
    session
)

__all__ = [
    'categories',
    'dashboard',
    'events',
    'health',
    'media',
    'notifications',
    'reports',
    'session'
]
