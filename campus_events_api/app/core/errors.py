"""
Domain error types.

Services raise these exceptions on write paths whose preconditions do
not hold (missing target, duplicate registration, full event, taken
username, bad credentials).  Read paths never raise; they return
``None`` or an empty list instead.

Every error subclasses ``ValueError`` and carries the HTTP status the
request layer should answer with, so endpoints can translate them with
a single ``except`` clause.
"""

from fastapi import status


class CampusEventsError(ValueError):
    """Base class for all domain failures."""

    http_status: int = status.HTTP_400_BAD_REQUEST
    code: str = "campus_events_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(CampusEventsError):
    """A write operation required an entity that does not exist."""

    http_status = status.HTTP_404_NOT_FOUND
    code = "not_found"

    def __init__(self, entity: str, message: str | None = None) -> None:
        self.entity = entity
        super().__init__(message or f"{entity.capitalize()} not found")


class ConflictError(CampusEventsError):
    """The request clashes with the current state of the store."""

    code = "conflict"


class DuplicateRegistrationError(ConflictError):
    code = "duplicate_registration"

    def __init__(self, user_id: int, event_id: int) -> None:
        self.user_id = user_id
        self.event_id = event_id
        super().__init__("User already registered for this event")


class CapacityExceededError(ConflictError):
    code = "capacity_exceeded"

    def __init__(self, event_id: int, capacity: int) -> None:
        self.event_id = event_id
        self.capacity = capacity
        super().__init__("Event is at full capacity")


class DuplicateUsernameError(ConflictError):
    code = "duplicate_username"

    def __init__(self, username: str) -> None:
        self.username = username
        super().__init__("Username already taken")


class UnauthorizedError(CampusEventsError):
    http_status = status.HTTP_401_UNAUTHORIZED
    code = "unauthorized"


class InvalidCredentialsError(UnauthorizedError):
    code = "invalid_credentials"

    def __init__(self) -> None:
        super().__init__("Invalid username or password")
