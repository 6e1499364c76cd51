from backend.core.tracker import SessionTracker
from backend.inference.classifier import classify


def test_get_or_create_returns_same_session(store):
    tracker = SessionTracker(store)
    first = tracker.get_or_create("u1")
    assert tracker.get_or_create("u1") is first
    assert len(store) == 1


def test_apply_analysis_overwrites_mood_fields(store):
    session = store.get_or_create("u1")
    returned = SessionTracker.apply_analysis(session, classify("I'm so stressed"))
    assert returned is session
    assert session.mood == "stressed"
    assert session.risk_level == "medium"
    assert session.last_category == "stress"


def test_negative_streak_counts_and_resets(store):
    session = store.get_or_create("u1")
    messages = ["I want to die", "I'm anxious", "I feel empty", "so much pressure"]
    for n, text in enumerate(messages, start=1):
        SessionTracker.apply_analysis(session, classify(text))
        assert session.consecutive_negative == n

    SessionTracker.apply_analysis(session, classify("hi"))
    assert session.consecutive_negative == 0
    assert session.risk_level == "low"


def test_crisis_counts_as_single_step(store):
    session = store.get_or_create("u1")
    SessionTracker.apply_analysis(session, classify("I want to die"))
    assert session.consecutive_negative == 1


def test_store_create_and_delete(store):
    session = store.create("u1")
    assert store.get("u1") is session
    assert store.user_ids() == ["u1"]
    assert store.delete("u1") is True
    assert session.evicted
    assert store.get("u1") is None
    assert store.delete("u1") is False


def test_create_flags_replaced_session(store):
    old = store.get_or_create("u1")
    new = store.create("u1")
    assert new is not old
    assert old.evicted
    assert not new.evicted
    assert store.get("u1") is new
