"""Conversation engine: turn processing, idle eviction and session insights."""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from datetime import timedelta
from threading import Event, Thread
from typing import Any, Dict, FrozenSet, List, Optional

from backend.core.config import Settings, settings as default_settings
from backend.core.session_store import SessionStore, Turn, utcnow
from backend.core.tracker import SessionTracker
from backend.inference.classifier import Analysis, build_rules, classify
from backend.inference.lexicon import CRISIS, WELCOME_MESSAGE
from backend.inference.responder import BotResponse, ResponseGenerator, acknowledge_mood_rating

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Insights:
    total_user_turns: int
    dominant_mood: Optional[str]
    risk_level: str
    distinct_categories_seen: FrozenSet[str]
    consecutive_negative: int
    session_duration_ms: int
    mood_ratings_count: int = 0
    average_mood_rating: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_user_turns": self.total_user_turns,
            "dominant_mood": self.dominant_mood,
            "risk_level": self.risk_level,
            "distinct_categories_seen": sorted(self.distinct_categories_seen),
            "consecutive_negative": self.consecutive_negative,
            "session_duration_ms": self.session_duration_ms,
            "mood_ratings_count": self.mood_ratings_count,
            "average_mood_rating": self.average_mood_rating,
        }


@dataclass(frozen=True)
class TurnResult:
    analysis: Analysis
    response: BotResponse
    history_length: int


class SupportEngine:
    def __init__(
        self,
        store: SessionStore | None = None,
        generator: ResponseGenerator | None = None,
        config: Settings = default_settings,
        clock=utcnow,
    ) -> None:
        self.config = config
        self._clock = clock
        self.store = store or SessionStore(clock=clock)
        self.tracker = SessionTracker(self.store)
        self.generator = generator or ResponseGenerator(rng=random.Random(config.responder_seed))
        self._rules = build_rules(config.greeting_max_length)

    def process_turn(self, user_id: str, session_id: str, text: str) -> BotResponse:
        return self.handle_turn(user_id, session_id, text).response

    def handle_turn(self, user_id: str, session_id: str, text: str) -> TurnResult:
        """Classify, update state and reply as one unit under the session lock.

        ``session_id`` is kept for correlation with external storage only;
        state is keyed by ``user_id``.
        """
        while True:
            sess = self.tracker.get_or_create(user_id)
            with sess.lock:
                if sess.evicted:
                    # swept between lookup and lock; resolve a fresh session
                    continue
                sess.session_id = session_id
                sess.conversation_history.append(Turn("user", text, self._clock()))
                analysis = classify(text, self._rules)
                self.tracker.apply_analysis(sess, analysis)
                response = self.generator.generate(analysis, sess)
                sess.conversation_history.append(
                    Turn("bot", response.message, self._clock(), category=analysis.category)
                )
                history_length = len(sess.conversation_history)
                streak = sess.consecutive_negative
            break

        if analysis.category == CRISIS:
            logger.warning("Crisis language detected for user %s", user_id)
        logger.debug(
            "user=%s category=%s risk=%s streak=%d",
            user_id, analysis.category, analysis.risk_level, streak,
        )
        return TurnResult(analysis=analysis, response=response, history_length=history_length)

    def submit_mood_rating(self, user_id: str, session_id: str, rating: int, notes: str = "") -> str:
        """Record an already validated 1-10 rating and return the follow-up text."""
        while True:
            sess = self.tracker.get_or_create(user_id)
            with sess.lock:
                if sess.evicted:
                    continue
                sess.session_id = session_id
                sess.mood_ratings.append(rating)
            break
        if notes:
            logger.debug("Mood rating for user %s carried notes (%d chars)", user_id, len(notes))
        return acknowledge_mood_rating(rating)

    def get_history(self, user_id: str, limit: int | None = None) -> List[Turn] | None:
        """Most recent turns, oldest first, capped at ``max_turns_kept``."""
        sess = self.store.get(user_id)
        if sess is None:
            return None
        cap = self.config.max_turns_kept
        if limit is not None:
            cap = max(0, min(limit, cap))
        with sess.lock:
            history = list(sess.conversation_history)
        return history[-cap:] if cap else []

    @property
    def lexicon_version(self) -> str:
        return self.generator.lexicon.version

    @staticmethod
    def welcome_message() -> str:
        return WELCOME_MESSAGE

    def sweep_idle_sessions(self, idle_threshold: timedelta | None = None) -> List[str]:
        if idle_threshold is None:
            idle_threshold = timedelta(hours=self.config.session_idle_hours)
        return self.store.sweep(idle_threshold, now=self._clock())

    def get_insights(self, user_id: str) -> Insights | None:
        sess = self.store.get(user_id)
        if sess is None:
            return None
        with sess.lock:
            history = list(sess.conversation_history)
            categories = {t.category for t in history if t.speaker == "bot" and t.category}
            if sess.last_category:
                categories.add(sess.last_category)
            duration = self._clock() - history[0].timestamp if history else timedelta(0)
            ratings = list(sess.mood_ratings)
            return Insights(
                total_user_turns=sum(1 for t in history if t.speaker == "user"),
                dominant_mood=sess.mood,
                risk_level=sess.risk_level,
                distinct_categories_seen=frozenset(categories),
                consecutive_negative=sess.consecutive_negative,
                session_duration_ms=int(duration.total_seconds() * 1000),
                mood_ratings_count=len(ratings),
                average_mood_rating=round(sum(ratings) / len(ratings), 2) if ratings else None,
            )


class IdleSessionSweeper:
    """Daemon thread that evicts idle sessions every ``interval`` seconds."""

    def __init__(self, engine: SupportEngine, interval: float) -> None:
        self.engine = engine
        self.interval = interval
        self._stop = Event()
        self._thread: Thread | None = None

    def start(self) -> None:
        if self._thread is not None:
            return
        self._thread = Thread(target=self._run, name="idle-session-sweeper", daemon=True)
        self._thread.start()

    def stop(self, timeout: float | None = 5.0) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None

    def _run(self) -> None:
        while not self._stop.wait(self.interval):
            try:
                evicted = self.engine.sweep_idle_sessions()
            except Exception:  # keep sweeping on the next tick
                logger.exception("Idle session sweep failed")
                continue
            if evicted:
                logger.info("Evicted %d idle session(s)", len(evicted))
