from fastapi.testclient import TestClient
import pytest

from classroom_admin.constants.store_constants import (
    LIVE_STREAM_COLLECTION,
    LIVE_STREAM_KEY,
    RESULTS_COLLECTION,
    SETTINGS_COLLECTION,
    TIMER_KEY,
)
from classroom_admin.server.api_server import create_api_app


@pytest.fixture
def client(manager):
    return TestClient(create_api_app(manager))


def seed_results(store):
    store.seed(RESULTS_COLLECTION, "r1", {"name": "A", "batchTime": "9am", "phoneNumber": "1", "score": 5})
    store.seed(RESULTS_COLLECTION, "r2", {"name": "A", "batchTime": "9am", "phoneNumber": "1", "score": 9})
    store.seed(RESULTS_COLLECTION, "r3", {"name": "B", "batchTime": "9am", "phoneNumber": "2", "score": 7})


def test_viewer_page_is_served(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "Live Class" in response.text


def test_live_lifecycle(client):
    assert client.get("/live").json() == {"url": "", "is_live": False, "timestamp": None}

    started = client.post("/live/start", json={"link": "https://youtu.be/dQw4w9WgXcQ"})
    assert started.status_code == 201
    assert started.json() == {
        "url": "https://www.youtube.com/embed/dQw4w9WgXcQ",
        "is_live": True,
        "timestamp": "2024-03-05T14:30:15+00:00",
    }

    ended = client.post("/live/end")
    assert ended.status_code == 201
    assert ended.json()["title"] == "Class on 3/5/2024"
    assert client.get("/live").json()["is_live"] is False

    past = client.get("/past-classes").json()
    assert [entry["url"] for entry in past] == ["https://www.youtube.com/embed/dQw4w9WgXcQ"]


def test_invalid_link_is_unprocessable(client, store):
    response = client.post("/live/start", json={"link": "not a link"})
    assert response.status_code == 422
    assert store.writes() == []


def test_end_without_stream_conflicts(client):
    assert client.post("/live/end").status_code == 409


def test_store_failure_maps_to_service_unavailable(client, store):
    store.fail_operations.add("get")
    response = client.get("/live")
    assert response.status_code == 503


def test_results_are_deduplicated(client, store):
    seed_results(store)
    payload = client.get("/results").json()
    assert [(row["id"], row["score"]) for row in payload] == [("r1", 5), ("r3", 7)]


def test_delete_results(client, store):
    seed_results(store)
    response = client.post("/results/delete", json={"ids": ["r1", "r3"]})
    assert response.status_code == 200
    assert sorted(response.json()["deleted"]) == ["r1", "r3"]
    assert response.json()["failed"] == {}


def test_delete_results_partial_failure(client, store):
    seed_results(store)
    store.fail_keys.add("r3")
    response = client.post("/results/delete", json={"ids": ["r1", "r3"]})
    assert response.status_code == 207
    assert response.json()["deleted"] == ["r1"]
    assert list(response.json()["failed"]) == ["r3"]


def test_delete_results_with_empty_selection(client, store):
    response = client.post("/results/delete", json={"ids": []})
    assert response.status_code == 422
    assert store.calls == []


def test_results_report(client, store):
    seed_results(store)
    response = client.get("/results/report")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "<td>B</td>" in response.text


def test_set_timer(client, store):
    response = client.put("/settings/timer", json={"minutes": 30})
    assert response.status_code == 200
    assert response.json() == {"timer": 1800}
    assert store.get_by_key(SETTINGS_COLLECTION, TIMER_KEY) == {"timer": 1800}


def test_negative_timer_is_rejected(client, store):
    response = client.put("/settings/timer", json={"hours": -1})
    assert response.status_code == 422
    assert store.get_by_key(SETTINGS_COLLECTION, TIMER_KEY) is None


def test_live_state_reads_stored_record(client, store):
    store.seed(LIVE_STREAM_COLLECTION, LIVE_STREAM_KEY, {"url": "https://www.youtube.com/embed/abcdefghijk", "isLive": True})
    assert client.get("/live").json()["is_live"] is True
