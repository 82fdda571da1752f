"""
Concurrent registration requests against a capacity-1 event.

Ten users try to register for the same single-seat event at once.
Exactly one request must succeed; the others are refused with the
capacity error and the stored count never exceeds the capacity.
"""
from concurrent.futures import ThreadPoolExecutor

from fastapi.testclient import TestClient

from tests.conftest import make_event_payload


def register(client: TestClient, user_id: int, event_id: int) -> tuple[int, dict]:
    response = client.post("/api/registrations", json={"userId": user_id, "eventId": event_id})
    return response.status_code, response.json()


def test_race_condition(client: TestClient):
    num_requests = 10
    user_ids = []
    for i in range(num_requests):
        response = client.post(
            "/api/users",
            json={"username": f"racer{i}", "password": "pw", "email": f"racer{i}@uni.edu"},
        )
        user_ids.append(response.json()["id"])
    event = client.post("/api/events", json=make_event_payload(capacity=1)).json()

    with ThreadPoolExecutor(max_workers=num_requests) as executor:
        futures = [executor.submit(register, client, user_id, event["id"]) for user_id in user_ids]
        results = [f.result() for f in futures]

    successful = [body for status, body in results if status == 201]
    refused = [body for status, body in results if status == 400]

    assert len(successful) == 1, f"Expected 1 successful registration, got {len(successful)}"
    assert len(refused) == num_requests - 1
    assert all(body["detail"] == "Event is at full capacity" for body in refused)

    count = client.get(f"/api/events/{event['id']}/registrations/count").json()["count"]
    assert count == 1
    assert count <= event["capacity"]
