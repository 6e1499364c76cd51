from backend.inference.classifier import classify
from backend.inference.responder import BotResponse
from backend.services import analytics


def test_summarize_mood_ratings_bands():
    summary = analytics.summarize_mood_ratings([1, 2, 4, 6, 7, 10])
    assert summary["total_entries"] == 6
    assert summary["average_mood"] == 5.0
    assert summary["mood_distribution"] == {
        "Very Low (1-2)": 2,
        "Low (3-4)": 1,
        "Neutral (5-6)": 1,
        "Good (7-8)": 1,
        "Excellent (9-10)": 1,
    }


def test_summarize_no_ratings():
    assert analytics.summarize_mood_ratings([])["average_mood"] == 0.0


def test_record_turn_hashes_user():
    analytics.reset()
    entry = analytics.record_turn("alice@example.com", classify("hi"), BotResponse(message="Hello"))
    assert "alice" not in entry["user_hash"]
    assert entry["escalated"] is False
    assert analytics.aggregate_metrics()["total_turns"] == 1
