"""
Registration endpoints for API v1.

``POST /registrations`` registers a user for an event and
``DELETE /registrations/{user_id}/{event_id}`` cancels it.  Capacity
and uniqueness are enforced by ``RegistrationService``; a missing
event or user is answered with 404, a duplicate registration or a full
event with 400.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from campus_events_api.app.api.deps import get_registration_service
from campus_events_api.app.core.errors import CampusEventsError
from campus_events_api.app.schemas.event import Message
from campus_events_api.app.schemas.registration import RegistrationCreate, RegistrationRead
from campus_events_api.app.services import RegistrationService


router = APIRouter()


@router.post("", response_model=RegistrationRead, status_code=status.HTTP_201_CREATED)
async def register_for_event(
    payload: RegistrationCreate,
    service: RegistrationService = Depends(get_registration_service),
) -> RegistrationRead:
    """Register a user for an event."""
    try:
        registration = service.register(payload.user_id, payload.event_id)
    except CampusEventsError as e:
        raise HTTPException(status_code=e.http_status, detail=str(e)) from e
    return RegistrationRead.from_record(registration)


@router.delete("/{user_id}/{event_id}", response_model=Message)
async def cancel_registration(
    user_id: int,
    event_id: int,
    service: RegistrationService = Depends(get_registration_service),
) -> Message:
    """Cancel a user's registration for an event."""
    try:
        service.cancel(user_id, event_id)
    except CampusEventsError as e:
        raise HTTPException(status_code=e.http_status, detail=str(e)) from e
    return Message(message="Registration cancelled successfully")
