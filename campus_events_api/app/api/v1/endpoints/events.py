"""
Event endpoints for API v1.

These routes expose the event catalog: chronological listings,
category filters, substring search, single event details with their
registration count, and organizer operations to create, update and
delete events.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from campus_events_api.app.api.deps import get_event_service, get_registration_service
from campus_events_api.app.core.errors import CampusEventsError
from campus_events_api.app.schemas.event import (
    EventCreate,
    EventDetail,
    EventRead,
    EventUpdate,
    Message,
    RegistrationCount,
)
from campus_events_api.app.schemas.registration import RegistrationRead
from campus_events_api.app.services import EventService, RegistrationService


router = APIRouter()


@router.get("", response_model=List[EventRead])
async def list_events(service: EventService = Depends(get_event_service)) -> List[EventRead]:
    """List all events ordered by date and start time."""
    return [EventRead.from_record(event) for event in service.list_events()]


@router.get("/category/{category}", response_model=List[EventRead])
async def list_events_by_category(
    category: str,
    service: EventService = Depends(get_event_service),
) -> List[EventRead]:
    """List events of one category.

    The match is exact and case sensitive; an unknown category simply
    yields an empty list.
    """
    return [EventRead.from_record(event) for event in service.list_events_by_category(category)]


@router.get("/search/{query}", response_model=List[EventRead])
async def search_events(
    query: str,
    service: EventService = Depends(get_event_service),
) -> List[EventRead]:
    """Search title, description, location and category, ignoring case."""
    return [EventRead.from_record(event) for event in service.search_events(query)]


@router.get("/{event_id}", response_model=EventDetail)
async def get_event(
    event_id: int,
    service: EventService = Depends(get_event_service),
) -> EventDetail:
    """Retrieve a single event with its current registration count."""
    detail = service.get_event_detail(event_id)
    if detail is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")
    read = EventRead.from_record(detail["event"])
    return EventDetail(**read.model_dump(), registration_count=detail["registration_count"])


@router.post("", response_model=EventRead, status_code=status.HTTP_201_CREATED)
async def create_event(
    event: EventCreate,
    service: EventService = Depends(get_event_service),
) -> EventRead:
    """Create a new event.

    The body is validated against the wire formats (dates
    ``YYYY-MM-DD``, times ``HH:MM``, a known category and a positive
    capacity); invalid payloads are answered with 400.
    """
    return EventRead.from_record(service.create_event(event.model_dump()))


@router.put("/{event_id}", response_model=EventRead)
async def update_event(
    event_id: int,
    updates: EventUpdate,
    service: EventService = Depends(get_event_service),
) -> EventRead:
    """Update an existing event.

    Partial updates are supported; any unspecified fields remain
    unchanged.
    """
    try:
        return EventRead.from_record(service.update_event(event_id, updates.changes()))
    except CampusEventsError as e:
        raise HTTPException(status_code=e.http_status, detail=str(e)) from e


@router.delete("/{event_id}", response_model=Message)
async def delete_event(
    event_id: int,
    service: EventService = Depends(get_event_service),
) -> Message:
    """Delete an event.

    Registrations for the event are kept; they no longer show up in
    the registrant's event list.
    """
    try:
        service.delete_event(event_id)
    except CampusEventsError as e:
        raise HTTPException(status_code=e.http_status, detail=str(e)) from e
    return Message(message="Event deleted successfully")


@router.get("/{event_id}/registrations", response_model=List[RegistrationRead])
async def list_event_registrations(
    event_id: int,
    service: RegistrationService = Depends(get_registration_service),
) -> List[RegistrationRead]:
    """List all registrations for an event."""
    return [RegistrationRead.from_record(r) for r in service.list_for_event(event_id)]


@router.get("/{event_id}/registrations/count", response_model=RegistrationCount)
async def registration_count(
    event_id: int,
    service: EventService = Depends(get_event_service),
) -> RegistrationCount:
    """Number of registrations for an event; 0 for unknown events."""
    return RegistrationCount(count=service.registration_count(event_id))
