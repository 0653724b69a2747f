"""Session router module."""

from fastapi import APIRouter

from ...session import login
from ..schemas import SessionIn

router = APIRouter(tags=["session"])

@router.post("/session")
async def start_session(payload: SessionIn):
    """
    Pick a role for this client.

    The returned role and username are sent back by the client as the
    X-User-Role and X-Username headers.
    """
    return login(payload.username, payload.role, payload.password).to_dict()
