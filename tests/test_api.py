import pytest
from fastapi.testclient import TestClient

from backend import event_log
from backend.app import app
from backend.inference.lexicon import LEXICON_VERSION
from backend.services import analytics


@pytest.fixture
def client(engine, monkeypatch):
    monkeypatch.setattr(app.state, "engine", engine)
    event_log.clear_events()
    analytics.reset()
    return TestClient(app)


def _say(client, text, user_id="u1"):
    r = client.post(
        "/api/chat/bot-response",
        json={"user_id": user_id, "session_id": "s1", "message": text},
    )
    assert r.status_code == 200
    return r.json()


def test_health(client):
    r = client.get("/api/health")
    assert r.status_code == 200
    assert r.json()["status"] == "OK"


def test_welcome(client):
    r = client.get("/api/chat/welcome")
    assert r.status_code == 200
    assert r.json()["message"].startswith("Hello!")


def test_bot_response_greeting(client):
    data = _say(client, "hi")
    assert data["user_message"] == "hi"
    assert data["bot_response"]["resources"] is None
    assert data["bot_response"]["mood_check"] is None
    assert data["timestamp"]


def test_bot_response_crisis_payload(client):
    data = _say(client, "I want to die")
    bot = data["bot_response"]
    assert bot["resources"]["title"] == "Immediate Crisis Support"
    assert bot["mood_check"]["scale"] == list(range(1, 11))
    assert "how safe do you feel" in bot["mood_check"]["question"]


def test_bot_response_requires_user_id(client):
    r = client.post("/api/chat/bot-response", json={"session_id": "s1", "message": "hi"})
    assert r.status_code == 422


@pytest.mark.parametrize("rating", [0, 11, -3])
def test_mood_rating_out_of_range_rejected(client, engine, rating):
    r = client.post(
        "/api/chat/mood", json={"user_id": "u1", "session_id": "s1", "mood_rating": rating}
    )
    assert r.status_code == 422
    assert engine.store.get("u1") is None


def test_mood_rating_accepted(client, engine):
    r = client.post(
        "/api/chat/mood", json={"user_id": "u1", "session_id": "s1", "mood_rating": 5}
    )
    assert r.status_code == 201
    assert "mixed day" in r.json()["follow_up"]
    assert engine.store.get("u1").mood_ratings == [5]


def test_insights_endpoint(client):
    assert client.get("/api/chat/insights/u1").status_code == 404
    _say(client, "I'm so stressed")
    r = client.get("/api/chat/insights/u1")
    assert r.status_code == 200
    insights = r.json()["insights"]
    assert insights["total_user_turns"] == 1
    assert insights["dominant_mood"] == "stressed"


def test_sweep_endpoint(client, clock):
    _say(client, "hi")
    clock.advance(hours=30)
    r = client.post("/api/chat/sweep")
    assert r.status_code == 200
    assert r.json()["evicted"] == ["u1"]


def test_events_and_analytics(client):
    _say(client, "I want to die")
    _say(client, "hi", user_id="u2")

    logs = client.get("/logs", params={"kind": "chat.turn"}).json()
    assert logs["count"] == 2
    assert logs["logs"][0]["payload"]["user_id"] == "u2"

    metrics = client.get("/analytics").json()
    assert metrics["total_turns"] == 2
    assert metrics["sessions_tracked"] == 2
    assert metrics["category_counts"] == {"crisis": 1, "greeting": 1}
    assert metrics["escalations"] == 1


def test_mood_analytics_endpoint(client):
    assert client.get("/api/chat/mood-analytics/u1").status_code == 404
    for rating in (2, 9):
        client.post("/api/chat/mood", json={"user_id": "u1", "session_id": "s1", "mood_rating": rating})
    analytics_payload = client.get("/api/chat/mood-analytics/u1").json()["analytics"]
    assert analytics_payload["average_mood"] == 5.5
    assert analytics_payload["mood_distribution"]["Very Low (1-2)"] == 1
    assert analytics_payload["mood_distribution"]["Excellent (9-10)"] == 1


def test_health_reports_lexicon_version(client):
    assert client.get("/api/health").json()["lexicon_version"] == LEXICON_VERSION


def test_history_endpoint(client):
    assert client.get("/api/chat/history/u1").status_code == 404
    _say(client, "hi")
    _say(client, "I'm so stressed")
    body = client.get("/api/chat/history/u1", params={"limit": 3}).json()
    assert body["count"] == 3
    assert [m["sender"] for m in body["messages"]] == ["bot", "user", "bot"]
    assert body["messages"][-1]["category"] == "stress"
