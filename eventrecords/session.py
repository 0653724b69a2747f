"""Viewer/editor session flag.

This mirrors the role picker of the college portal: a user name plus a
role, where the editor role needs a password to be typed but nothing checks
it. It decides which actions a client offers; it is not access control.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .models.event import ValidationFailed

class Role(str, Enum):
    """Session roles."""
    VIEW = 'view'
    EDIT = 'edit'

@dataclass(frozen=True)
class UserSession:
    username: str
    role: Role

    @property
    def can_edit(self) -> bool:
        return self.role is Role.EDIT

    def to_dict(self):
        return {'username': self.username, 'role': self.role.value}

def login(username: str, role: str, password: Optional[str] = None) -> UserSession:
    """
    Start a session.

    Raises:
        ValidationFailed: If the user name is blank, the role is unknown or an
                          editor session has no password
    """
    username = (username or '').strip()
    if not username:
        raise ValidationFailed("Username is required", ['username'])
    try:
        parsed = Role(role)
    except ValueError:
        raise ValidationFailed(f"Unknown role: {role!r}", ['role'])
    if parsed is Role.EDIT and not password:
        raise ValidationFailed("Password is required for edit access", ['password'])
    return UserSession(username=username, role=parsed)

def session_from_headers(role: Optional[str], username: Optional[str]) -> Optional[UserSession]:
    """Rebuild a session from the role and user name a client sends back."""
    if not role or not (username or '').strip():
        return None
    try:
        return UserSession(username=username.strip(), role=Role(role))
    except ValueError:
        return None
