"""
Test event queries and event write operations.
"""
import pytest

from campus_events_api.app.core.errors import NotFoundError
from campus_events_api.app.services import EventService, RegistrationService
from tests.conftest import make_event_data


class TestListing:
    def test_sorted_by_date_then_start_time(self, storage, event_service):
        storage.create_event(make_event_data(title="C", date="2023-11-25", start_time="10:00"))
        storage.create_event(make_event_data(title="A", date="2023-11-15", start_time="09:00"))
        storage.create_event(make_event_data(title="B", date="2023-11-20", start_time="11:00"))
        storage.create_event(make_event_data(title="A2", date="2023-11-15", start_time="08:30"))

        titles = [event.title for event in event_service.list_events()]

        assert titles == ["A2", "A", "B", "C"]

    def test_identical_timestamps_keep_insertion_order(self, storage, event_service):
        for title in ("first", "second", "third"):
            storage.create_event(make_event_data(title=title))

        assert [e.title for e in event_service.list_events()] == ["first", "second", "third"]

    def test_sample_events_in_chronological_order(self, sample_storage):
        events = EventService(sample_storage).list_events()

        assert [(e.date, e.start_time) for e in events[:3]] == [
            ("2023-11-15", "09:00"),
            ("2023-11-20", "11:00"),
            ("2023-11-25", "10:00"),
        ]
        keys = [(e.date, e.start_time) for e in events]
        assert keys == sorted(keys)

    def test_by_category_is_exact_and_sorted(self, sample_storage):
        service = EventService(sample_storage)

        academic = service.list_events_by_category("academic")

        assert [e.title for e in academic] == ["Annual Tech Symposium", "Research Symposium"]
        assert service.list_events_by_category("Academic") == []
        assert service.list_events_by_category("conference") == []


class TestSearch:
    def test_career_matches_only_career_fair(self, sample_storage):
        results = EventService(sample_storage).search_events("career")

        assert [e.title for e in results] == ["Fall Career Fair"]

    def test_case_insensitive_over_location(self, sample_storage):
        results = EventService(sample_storage).search_events("CAMPUS green")

        assert [e.title for e in results] == ["Campus Spring Festival"]

    def test_matches_several_fields(self, sample_storage):
        results = EventService(sample_storage).search_events("symposium")

        assert [e.title for e in results] == ["Annual Tech Symposium", "Research Symposium"]

    def test_no_match(self, sample_storage):
        assert EventService(sample_storage).search_events("quidditch") == []


class TestCounts:
    def test_registration_count(self, sample_storage):
        service = EventService(sample_storage)

        assert service.registration_count(1) == 1
        assert service.registration_count(2) == 0
        assert service.registration_count(999) == 0

    def test_event_detail(self, sample_storage):
        detail = EventService(sample_storage).get_event_detail(3)

        assert detail["event"].title == "Fall Career Fair"
        assert detail["registration_count"] == 1

    def test_event_detail_missing(self, event_service):
        assert event_service.get_event_detail(1) is None


class TestUserEvents:
    def test_user_events_in_store_order(self, sample_storage):
        events = EventService(sample_storage).user_events(1)

        assert [e.id for e in events] == [1, 3]

    def test_user_without_registrations(self, sample_storage):
        assert EventService(sample_storage).user_events(42) == []

    def test_orphaned_registrations_are_skipped(self, storage):
        user = storage.create_user({"username": "ann", "password": "pw", "email": "ann@uni.edu"})
        kept = storage.create_event(make_event_data(title="Kept"))
        dropped = storage.create_event(make_event_data(title="Dropped"))
        registrations = RegistrationService(storage)
        registrations.register(user.id, kept.id)
        registrations.register(user.id, dropped.id)
        service = EventService(storage)

        service.delete_event(dropped.id)

        assert [e.title for e in service.user_events(user.id)] == ["Kept"]
        assert len(registrations.list_for_user(user.id)) == 2


class TestWrites:
    def test_create_event(self, event_service):
        event = event_service.create_event(make_event_data())

        assert event.id == 1
        assert event_service.get_event(1).title == "Chess Club Night"

    def test_update_event_partial(self, event_service):
        event = event_service.create_event(make_event_data())

        updated = event_service.update_event(event.id, {"location": "Gym", "capacity": 3})

        assert updated.location == "Gym"
        assert updated.capacity == 3
        assert updated.title == event.title
        assert updated.created_at == event.created_at

    def test_update_missing_event(self, event_service):
        with pytest.raises(NotFoundError):
            event_service.update_event(7, {"title": "x"})

    def test_delete_event(self, event_service):
        event = event_service.create_event(make_event_data())

        event_service.delete_event(event.id)

        assert event_service.get_event(event.id) is None
        with pytest.raises(NotFoundError):
            event_service.delete_event(event.id)
