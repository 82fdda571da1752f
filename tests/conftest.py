import pytest
from fastapi.testclient import TestClient

from campus_events_api.app.core.config import Settings
from campus_events_api.app.core.sample_data import load_sample_data
from campus_events_api.app.core.storage import MemoryStorage
from campus_events_api.app.main import create_app
from campus_events_api.app.services import EventService, RegistrationService, UserService


def make_event_data(**overrides) -> dict:
    """Internal (snake_case) event payload for service level tests."""
    data = {
        "title": "Chess Club Night",
        "description": "Casual games and a short tournament.",
        "date": "2024-03-01",
        "start_time": "18:00",
        "end_time": "21:00",
        "location": "Library Hall",
        "capacity": 10,
        "category": "social",
        "organizer_id": 1,
        "image_url": None,
    }
    data.update(overrides)
    return data


def make_event_payload(**overrides) -> dict:
    """Wire (camelCase) event payload for API tests."""
    data = {
        "title": "Chess Club Night",
        "description": "Casual games and a short tournament.",
        "date": "2024-03-01",
        "startTime": "18:00",
        "endTime": "21:00",
        "location": "Library Hall",
        "capacity": 10,
        "category": "social",
        "organizerId": 1,
    }
    data.update(overrides)
    return data


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def sample_storage() -> MemoryStorage:
    store = MemoryStorage()
    load_sample_data(store)
    return store


@pytest.fixture
def event_service(storage) -> EventService:
    return EventService(storage)


@pytest.fixture
def registration_service(storage) -> RegistrationService:
    return RegistrationService(storage)


@pytest.fixture
def user_service(storage) -> UserService:
    return UserService(storage)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(seed_sample_data=False, log_level="WARNING")


@pytest.fixture
def client(storage, test_settings):
    """Client over an empty store shared with the ``storage`` fixture."""
    app = create_app(settings=test_settings, storage=storage)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_client(sample_storage, test_settings):
    """Client over a store holding the six sample events."""
    app = create_app(settings=test_settings, storage=sample_storage)
    with TestClient(app) as test_client:
        yield test_client
