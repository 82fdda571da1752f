"""
Business logic for events.

``EventService`` covers event creation, partial updates and deletion
as well as every derived read: chronological listings, category
filters, substring search, registration counts and the events a user
is registered for.

Deleting an event does not remove its registrations.  Reads that
follow registrations to events skip rows whose event is gone.
"""

import logging
from typing import Any, Dict, List, Optional

from ..core.errors import NotFoundError
from ..core.storage import Event, Storage

logger = logging.getLogger(__name__)

SEARCH_FIELDS = ("title", "description", "location", "category")


def _chronological_key(event: Event) -> tuple:
    # Zero padded YYYY-MM-DD and HH:MM compare correctly as strings.
    return (event.date, event.start_time)


class EventService:
    """Service for managing and querying events."""

    def __init__(self, storage: Storage) -> None:
        self.storage = storage

    def create_event(self, data: Dict[str, Any]) -> Event:
        """Store a new event and return it with its id and ``created_at``."""
        event = self.storage.create_event(data)
        logger.info("Organizer %s created event %s '%s'", event.organizer_id, event.id, event.title)
        return event

    def get_event(self, event_id: int) -> Optional[Event]:
        return self.storage.get_event(event_id)

    def get_event_detail(self, event_id: int) -> Optional[Dict[str, Any]]:
        """Return the event and its registration count, or ``None``."""
        with self.storage.lock:
            event = self.storage.get_event(event_id)
            if event is None:
                return None
            return {"event": event, "registration_count": self.storage.count_registrations(event_id)}

    def update_event(self, event_id: int, changes: Dict[str, Any]) -> Event:
        """Apply a partial update to an event.

        Only fields present in ``changes`` are modified; ``id`` and
        ``created_at`` never change.  Lowering the capacity below the
        current number of registrations is accepted as is.  Raises
        ``NotFoundError`` if the event does not exist.
        """
        event = self.storage.update_event(event_id, changes)
        if event is None:
            raise NotFoundError("event")
        logger.info("Event %s updated: %s", event_id, sorted(changes))
        return event

    def delete_event(self, event_id: int) -> None:
        if not self.storage.delete_event(event_id):
            raise NotFoundError("event")
        logger.info("Event %s deleted", event_id)

    def list_events(self) -> List[Event]:
        """All events ordered by date and start time."""
        return sorted(self.storage.list_events(), key=_chronological_key)

    def list_events_by_category(self, category: str) -> List[Event]:
        return sorted(
            (event for event in self.storage.list_events() if event.category == category),
            key=_chronological_key,
        )

    def search_events(self, query: str) -> List[Event]:
        """Case-insensitive substring search over title, description, location and category."""
        needle = query.lower()
        return [
            event
            for event in self.storage.list_events()
            if any(needle in str(getattr(event, name)).lower() for name in SEARCH_FIELDS)
        ]

    def registration_count(self, event_id: int) -> int:
        return self.storage.count_registrations(event_id)

    def user_events(self, user_id: int) -> List[Event]:
        """Events the user is registered for, in store order."""
        with self.storage.lock:
            event_ids = {r.event_id for r in self.storage.list_registrations(user_id=user_id)}
            return [event for event in self.storage.list_events() if event.id in event_ids]
