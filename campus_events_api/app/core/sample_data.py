"""
Demo data loaded into a fresh store.

Creates the ``admin`` organizer account, six campus events spread over
every category but ``conference``, and registers the organizer for the
tech symposium and the career fair.
"""

import logging

from .storage import Storage

logger = logging.getLogger(__name__)

SAMPLE_USER = {
    "username": "admin",
    "password": "password123",
    "email": "admin@university.edu",
}

SAMPLE_EVENTS = [
    {
        "title": "Annual Tech Symposium",
        "description": "Join industry leaders and researchers for our annual technology symposium featuring keynotes, panel discussions, and networking.",
        "date": "2023-11-15",
        "start_time": "09:00",
        "end_time": "17:00",
        "location": "Main Auditorium",
        "capacity": 200,
        "category": "academic",
        "image_url": "https://images.unsplash.com/photo-1540575467063-178a50c2df87?ixlib=rb-1.2.1&auto=format&fit=crop&w=800&h=400&q=80",
    },
    {
        "title": "Campus Spring Festival",
        "description": "Celebrate the season with food, music, games, and performances from student organizations across campus.",
        "date": "2023-11-20",
        "start_time": "11:00",
        "end_time": "20:00",
        "location": "Campus Green",
        "capacity": 500,
        "category": "social",
        "image_url": "https://images.unsplash.com/photo-1560523159-4a9692d222f8?ixlib=rb-1.2.1&auto=format&fit=crop&w=800&h=400&q=80",
    },
    {
        "title": "Fall Career Fair",
        "description": "Connect with 50+ employers recruiting for internships and full-time positions. Bring your resume and professional attire.",
        "date": "2023-11-25",
        "start_time": "10:00",
        "end_time": "15:00",
        "location": "Student Union",
        "capacity": 200,
        "category": "career",
        "image_url": "https://images.unsplash.com/photo-1559223607-a43c990c692c?ixlib=rb-1.2.1&auto=format&fit=crop&w=800&h=400&q=80",
    },
    {
        "title": "Research Symposium",
        "description": "Undergraduate and graduate students showcase their research projects across disciplines with faculty judges and prizes.",
        "date": "2023-11-30",
        "start_time": "13:00",
        "end_time": "18:00",
        "location": "Science Building",
        "capacity": 100,
        "category": "academic",
        "image_url": "https://images.unsplash.com/photo-1532649538693-f3a2ec1bf8bd?ixlib=rb-1.2.1&auto=format&fit=crop&w=800&h=400&q=80",
    },
    {
        "title": "Intramural Basketball",
        "description": "Form a team of 5-7 players or sign up individually to be matched with a team for our winter basketball tournament.",
        "date": "2023-12-05",
        "start_time": "14:00",
        "end_time": "20:00",
        "location": "Sports Complex",
        "capacity": 80,
        "category": "sports",
        "image_url": "https://images.unsplash.com/photo-1569683795546-bf1ca0a8696a?ixlib=rb-1.2.1&auto=format&fit=crop&w=800&h=400&q=80",
    },
    {
        "title": "Leadership Workshop",
        "description": "Develop essential leadership skills through interactive exercises and insights from successful alumni leaders.",
        "date": "2023-12-10",
        "start_time": "15:30",
        "end_time": "17:30",
        "location": "Business Building, Room 204",
        "capacity": 35,
        "category": "workshop",
        "image_url": "https://images.unsplash.com/photo-1515187029135-18ee286d815b?ixlib=rb-1.2.1&auto=format&fit=crop&w=800&h=400&q=80",
    },
]


def load_sample_data(storage: Storage) -> None:
    """Populate ``storage`` with the demo organizer, events and registrations."""
    organizer = storage.create_user(SAMPLE_USER)
    events = [
        storage.create_event({**data, "organizer_id": organizer.id})
        for data in SAMPLE_EVENTS
    ]
    storage.create_registration(organizer.id, events[0].id)
    storage.create_registration(organizer.id, events[2].id)
    logger.info("Loaded %d sample events for organizer %s", len(events), organizer.username)
