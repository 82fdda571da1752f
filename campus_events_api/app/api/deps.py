"""
FastAPI dependencies providing services bound to the application store.

The store is created by ``create_app`` and kept on ``app.state``; no
module level store exists, so every application instance (and every
test client) works on its own data.
"""

from fastapi import Depends, Request

from ..core.storage import Storage
from ..services import EventService, RegistrationService, UserService


def get_storage(request: Request) -> Storage:
    return request.app.state.storage


def get_event_service(storage: Storage = Depends(get_storage)) -> EventService:
    return EventService(storage)


def get_registration_service(storage: Storage = Depends(get_storage)) -> RegistrationService:
    return RegistrationService(storage)


def get_user_service(storage: Storage = Depends(get_storage)) -> UserService:
    return UserService(storage)
