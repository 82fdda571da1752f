"""
In‑memory entity store.

The store owns three keyed collections (users, events and
registrations) and one identity counter per collection.  Ids start at
1, grow on every successful insert and are never reused, so deleting a
record leaves a gap.

``Storage`` describes the capability the services depend on;
``MemoryStorage`` is the implementation used by the application.  A
persistent backend only has to satisfy the same protocol.

Every public method runs under the store's re‑entrant lock, which is
also exposed as ``lock`` so that the registration engine can hold it
across its whole check‑then‑insert sequence.  Records are returned as
copies: mutating a returned object never changes stored state.
"""

import threading
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any, Dict, Iterator, List, Optional, Protocol


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class User:
    id: int
    username: str
    password: str
    email: str


@dataclass
class Event:
    id: int
    title: str
    description: str
    date: str
    start_time: str
    end_time: str
    location: str
    capacity: int
    category: str
    organizer_id: int
    image_url: Optional[str] = None
    created_at: datetime = field(default_factory=_utcnow)


@dataclass
class Registration:
    id: int
    user_id: int
    event_id: int
    created_at: datetime = field(default_factory=_utcnow)


# Fields an event update may touch; ``id`` and ``created_at`` are fixed.
EVENT_MUTABLE_FIELDS = frozenset(
    {
        "title",
        "description",
        "date",
        "start_time",
        "end_time",
        "location",
        "capacity",
        "category",
        "image_url",
        "organizer_id",
    }
)


class IdentityAllocator:
    """Hands out monotonically increasing ids for one entity kind."""

    def __init__(self, start: int = 1) -> None:
        self._next = start

    def allocate(self) -> int:
        value = self._next
        self._next += 1
        return value

    @property
    def next_id(self) -> int:
        return self._next


class Storage(Protocol):
    """Storage contract consumed by the services."""

    lock: threading.RLock

    def get_user(self, user_id: int) -> Optional[User]: ...

    def get_user_by_username(self, username: str) -> Optional[User]: ...

    def create_user(self, data: Dict[str, Any]) -> User: ...

    def get_event(self, event_id: int) -> Optional[Event]: ...

    def list_events(self) -> List[Event]: ...

    def create_event(self, data: Dict[str, Any]) -> Event: ...

    def update_event(self, event_id: int, changes: Dict[str, Any]) -> Optional[Event]: ...

    def delete_event(self, event_id: int) -> bool: ...

    def get_registration(self, user_id: int, event_id: int) -> Optional[Registration]: ...

    def list_registrations(
        self, event_id: Optional[int] = None, user_id: Optional[int] = None
    ) -> List[Registration]: ...

    def create_registration(self, user_id: int, event_id: int) -> Registration: ...

    def delete_registration(self, user_id: int, event_id: int) -> bool: ...

    def count_registrations(self, event_id: int) -> int: ...


class MemoryStorage:
    """Dictionary backed implementation of :class:`Storage`."""

    def __init__(self) -> None:
        self.lock = threading.RLock()
        self._users: Dict[int, User] = {}
        self._events: Dict[int, Event] = {}
        self._registrations: Dict[int, Registration] = {}
        self._user_ids = IdentityAllocator()
        self._event_ids = IdentityAllocator()
        self._registration_ids = IdentityAllocator()

    # Users

    def get_user(self, user_id: int) -> Optional[User]:
        with self.lock:
            user = self._users.get(user_id)
            return replace(user) if user else None

    def get_user_by_username(self, username: str) -> Optional[User]:
        with self.lock:
            for user in self._users.values():
                if user.username == username:
                    return replace(user)
            return None

    def create_user(self, data: Dict[str, Any]) -> User:
        with self.lock:
            user = User(
                id=self._user_ids.allocate(),
                username=data["username"],
                password=data["password"],
                email=data["email"],
            )
            self._users[user.id] = user
            return replace(user)

    # Events

    def get_event(self, event_id: int) -> Optional[Event]:
        with self.lock:
            event = self._events.get(event_id)
            return replace(event) if event else None

    def list_events(self) -> List[Event]:
        with self.lock:
            return [replace(event) for event in self._events.values()]

    def create_event(self, data: Dict[str, Any]) -> Event:
        with self.lock:
            event = Event(
                id=self._event_ids.allocate(),
                title=data["title"],
                description=data["description"],
                date=data["date"],
                start_time=data["start_time"],
                end_time=data["end_time"],
                location=data["location"],
                capacity=data["capacity"],
                category=data["category"],
                organizer_id=data["organizer_id"],
                image_url=data.get("image_url") or None,
            )
            self._events[event.id] = event
            return replace(event)

    def update_event(self, event_id: int, changes: Dict[str, Any]) -> Optional[Event]:
        with self.lock:
            event = self._events.get(event_id)
            if event is None:
                return None
            allowed = {k: v for k, v in changes.items() if k in EVENT_MUTABLE_FIELDS}
            if "image_url" in allowed:
                allowed["image_url"] = allowed["image_url"] or None
            updated = replace(event, **allowed)
            self._events[event_id] = updated
            return replace(updated)

    def delete_event(self, event_id: int) -> bool:
        # Registrations that reference the event are left in place.
        with self.lock:
            return self._events.pop(event_id, None) is not None

    # Registrations

    def _iter_registrations(
        self, event_id: Optional[int] = None, user_id: Optional[int] = None
    ) -> Iterator[Registration]:
        for registration in self._registrations.values():
            if event_id is not None and registration.event_id != event_id:
                continue
            if user_id is not None and registration.user_id != user_id:
                continue
            yield registration

    def get_registration(self, user_id: int, event_id: int) -> Optional[Registration]:
        with self.lock:
            found = next(self._iter_registrations(event_id=event_id, user_id=user_id), None)
            return replace(found) if found else None

    def list_registrations(
        self, event_id: Optional[int] = None, user_id: Optional[int] = None
    ) -> List[Registration]:
        with self.lock:
            return [replace(r) for r in self._iter_registrations(event_id=event_id, user_id=user_id)]

    def create_registration(self, user_id: int, event_id: int) -> Registration:
        with self.lock:
            registration = Registration(
                id=self._registration_ids.allocate(),
                user_id=user_id,
                event_id=event_id,
            )
            self._registrations[registration.id] = registration
            return replace(registration)

    def delete_registration(self, user_id: int, event_id: int) -> bool:
        with self.lock:
            found = next(self._iter_registrations(event_id=event_id, user_id=user_id), None)
            if found is None:
                return False
            del self._registrations[found.id]
            return True

    def count_registrations(self, event_id: int) -> int:
        with self.lock:
            return sum(1 for _ in self._iter_registrations(event_id=event_id))
