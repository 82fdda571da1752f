"""
User endpoints for API v1.

Sign up plus the per‑user views of registrations: the raw
registration rows and the events they point to.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from campus_events_api.app.api.deps import (
    get_event_service,
    get_registration_service,
    get_user_service,
)
from campus_events_api.app.core.errors import CampusEventsError
from campus_events_api.app.schemas.event import EventRead
from campus_events_api.app.schemas.registration import RegistrationRead
from campus_events_api.app.schemas.user import UserCreate, UserRead
from campus_events_api.app.services import EventService, RegistrationService, UserService


router = APIRouter()


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def register_user(
    user: UserCreate,
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Create a new user.

    The username must be unique; the password is never returned.
    """
    try:
        created = service.create_user(user.model_dump())
    except CampusEventsError as e:
        raise HTTPException(status_code=e.http_status, detail=str(e)) from e
    return UserRead.from_record(created)


@router.get("/{user_id}/registrations", response_model=List[RegistrationRead])
async def list_user_registrations(
    user_id: int,
    service: RegistrationService = Depends(get_registration_service),
) -> List[RegistrationRead]:
    return [RegistrationRead.from_record(r) for r in service.list_for_user(user_id)]


@router.get("/{user_id}/events", response_model=List[EventRead])
async def list_user_events(
    user_id: int,
    service: EventService = Depends(get_event_service),
) -> List[EventRead]:
    """Events the user is registered for."""
    return [EventRead.from_record(event) for event in service.user_events(user_id)]
