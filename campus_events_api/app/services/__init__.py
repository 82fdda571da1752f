"""
Service layer abstraction.

Each service encapsulates business logic for a domain and receives the
entity store it operates on at construction time.  Swapping
``MemoryStorage`` for a persistent backend requires no change to the
services or the API handlers.
"""

from .event_service import EventService
from .registration_service import RegistrationService
from .user_service import UserService

__all__ = ["EventService", "RegistrationService", "UserService"]
