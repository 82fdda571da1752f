"""
Pydantic models for event data.

``EventBase`` holds the fields shared by requests and responses,
``EventCreate`` is the body of ``POST /events``, ``EventUpdate`` the
partial body of ``PUT /events/{id}`` and ``EventRead`` the response
shape.  Field names travel as camelCase on the wire (``startTime``,
``imageUrl``, ``organizerId``) and are validated against the fixed
formats web clients already send: ``YYYY-MM-DD`` dates and 24‑hour
``HH:MM`` times.
"""

import enum
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from ..core.storage import Event

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"
TIME_PATTERN = r"^\d{2}:\d{2}$"
NULLABLE_FIELDS = frozenset({"image_url"})


class EventCategory(str, enum.Enum):
    ACADEMIC = "academic"
    SOCIAL = "social"
    CAREER = "career"
    SPORTS = "sports"
    WORKSHOP = "workshop"
    CONFERENCE = "conference"


class EventBase(BaseModel):
    title: str = Field(..., min_length=1, examples=["Annual Tech Symposium"])
    description: str = Field(..., examples=["Keynotes, panels and networking."])
    date: str = Field(..., pattern=DATE_PATTERN, examples=["2023-11-15"])
    start_time: str = Field(..., alias="startTime", pattern=TIME_PATTERN, examples=["09:00"])
    end_time: str = Field(..., alias="endTime", pattern=TIME_PATTERN, examples=["17:00"])
    location: str = Field(..., examples=["Main Auditorium"])
    capacity: int = Field(..., gt=0, examples=[200])
    category: EventCategory = Field(..., examples=["academic"])
    image_url: Optional[str] = Field(None, alias="imageUrl")
    organizer_id: int = Field(..., alias="organizerId", examples=[1])

    model_config = {
        "populate_by_name": True,
        "use_enum_values": True,
    }


class EventCreate(EventBase):
    """Schema for creating an event."""
    pass


class EventUpdate(BaseModel):
    """Schema for updating an event.

    All fields are optional; only provided fields will be updated.
    """
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    date: Optional[str] = Field(None, pattern=DATE_PATTERN)
    start_time: Optional[str] = Field(None, alias="startTime", pattern=TIME_PATTERN)
    end_time: Optional[str] = Field(None, alias="endTime", pattern=TIME_PATTERN)
    location: Optional[str] = None
    capacity: Optional[int] = Field(None, gt=0)
    category: Optional[EventCategory] = None
    image_url: Optional[str] = Field(None, alias="imageUrl")
    organizer_id: Optional[int] = Field(None, alias="organizerId")

    model_config = {
        "populate_by_name": True,
        "use_enum_values": True,
    }

    def changes(self) -> dict:
        """Return the supplied fields keyed by their internal names.

        An explicit null only counts for ``imageUrl``, where it removes
        the image; other fields sent as null are left unchanged.
        """
        return {
            k: v
            for k, v in self.model_dump(exclude_unset=True).items()
            if v is not None or k in NULLABLE_FIELDS
        }


class EventRead(EventBase):
    """Schema for reading an event from the API."""

    id: int
    created_at: datetime = Field(..., alias="createdAt")

    @classmethod
    def from_record(cls, event: Event) -> "EventRead":
        return cls(
            id=event.id,
            title=event.title,
            description=event.description,
            date=event.date,
            start_time=event.start_time,
            end_time=event.end_time,
            location=event.location,
            capacity=event.capacity,
            category=event.category,
            image_url=event.image_url,
            organizer_id=event.organizer_id,
            created_at=event.created_at,
        )


class EventDetail(EventRead):
    """Event together with its current number of registrations."""

    registration_count: int = Field(..., alias="registrationCount")


class RegistrationCount(BaseModel):
    count: int


class Message(BaseModel):
    message: str
