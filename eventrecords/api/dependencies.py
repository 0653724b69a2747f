"""Shared FastAPI dependencies."""

from typing import Optional

from fastapi import Header, HTTPException, Request

from ..repository import EventRepository
from ..session import UserSession, session_from_headers
from ..taxonomy import TaxonomyRegistry

def get_repository(request: Request) -> EventRepository:
    return request.app.state.repository

def get_registry(request: Request) -> TaxonomyRegistry:
    return request.app.state.registry

def require_session(
    x_user_role: Optional[str] = Header(default=None),
    x_username: Optional[str] = Header(default=None)
) -> UserSession:
    """Session taken from the role/user headers; 401 when absent."""
    session = session_from_headers(x_user_role, x_username)
    if session is None:
        raise HTTPException(status_code=401, detail="Authentication Required")
    return session

def require_editor(
    x_user_role: Optional[str] = Header(default=None),
    x_username: Optional[str] = Header(default=None)
) -> UserSession:
    """Like `require_session`, but only for the edit role."""
    session = require_session(x_user_role, x_username)
    if not session.can_edit:
        raise HTTPException(status_code=403, detail="Edit access required")
    return session
