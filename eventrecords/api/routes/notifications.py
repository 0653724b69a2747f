"""Notifications router module."""

from typing import Dict, List

from fastapi import APIRouter, Depends

from ...repository import EventRepository
from ..dependencies import get_repository, require_session

router = APIRouter(tags=["notifications"], dependencies=[Depends(require_session)])

@router.get("/notifications", response_model=List[Dict])
async def get_notifications(repository: EventRepository = Depends(get_repository)):
    """Recent success/error notifications, oldest first."""
    return [notification.to_dict() for notification in repository.notifications.recent()]
