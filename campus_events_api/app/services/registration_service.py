"""
Business logic for event registrations.

The ``RegistrationService`` is the only component allowed to create or
remove registrations.  It enforces the cross‑entity rules: both the
event and the user must exist, a user holds at most one registration
per event, and an event never accepts more registrations than its
capacity at the moment of registering.

Checks and the insert run inside the store's lock as one critical
section, so concurrent requests for the last seat cannot both pass
the capacity check.
"""

import logging
from typing import List

from ..core.errors import CapacityExceededError, DuplicateRegistrationError, NotFoundError
from ..core.storage import Registration, Storage

logger = logging.getLogger(__name__)


class RegistrationService:
    """Service for registering users to events and cancelling registrations."""

    def __init__(self, storage: Storage) -> None:
        self.storage = storage

    def register(self, user_id: int, event_id: int) -> Registration:
        """Register ``user_id`` for ``event_id``.

        Checks run in a fixed order so that errors are deterministic:
        event existence, user existence, duplicate registration, then
        capacity.  A full event that does not exist therefore reports
        a missing event rather than a capacity conflict.

        Raises
        ------
        NotFoundError
            If the event or the user does not exist.
        DuplicateRegistrationError
            If the user is already registered for the event.
        CapacityExceededError
            If the event has as many registrations as its capacity.
        """
        with self.storage.lock:
            event = self.storage.get_event(event_id)
            if event is None:
                raise NotFoundError("event")
            if self.storage.get_user(user_id) is None:
                raise NotFoundError("user")
            if self.storage.get_registration(user_id, event_id) is not None:
                raise DuplicateRegistrationError(user_id, event_id)
            count = self.storage.count_registrations(event_id)
            if count >= event.capacity:
                logger.info(
                    "Refused registration of user %s: event %s is full (%s/%s)",
                    user_id, event_id, count, event.capacity,
                )
                raise CapacityExceededError(event_id, event.capacity)
            registration = self.storage.create_registration(user_id, event_id)
        logger.info("User %s registered for event %s", user_id, event_id)
        return registration

    def cancel(self, user_id: int, event_id: int) -> None:
        """Cancel the registration of ``user_id`` for ``event_id``.

        Raises ``NotFoundError`` when the pair is not registered.
        """
        with self.storage.lock:
            if not self.storage.delete_registration(user_id, event_id):
                raise NotFoundError("registration")
        logger.info("User %s cancelled registration for event %s", user_id, event_id)

    def list_for_event(self, event_id: int) -> List[Registration]:
        return self.storage.list_registrations(event_id=event_id)

    def list_for_user(self, user_id: int) -> List[Registration]:
        return self.storage.list_registrations(user_id=user_id)
