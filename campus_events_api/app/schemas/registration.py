"""
Pydantic models for event registrations.

A registration links one user to one event.  Clients post
``{"userId": ..., "eventId": ...}`` and receive the stored row back
with its ``id`` and ``createdAt`` stamp.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from ..core.storage import Registration


class RegistrationCreate(BaseModel):
    user_id: int = Field(..., alias="userId", examples=[1])
    event_id: int = Field(..., alias="eventId", examples=[1])

    model_config = {
        "populate_by_name": True,
    }


class RegistrationRead(BaseModel):
    id: int
    user_id: int = Field(..., alias="userId")
    event_id: int = Field(..., alias="eventId")
    created_at: datetime = Field(..., alias="createdAt")

    model_config = {
        "populate_by_name": True,
    }

    @classmethod
    def from_record(cls, registration: Registration) -> "RegistrationRead":
        return cls(
            id=registration.id,
            user_id=registration.user_id,
            event_id=registration.event_id,
            created_at=registration.created_at,
        )
