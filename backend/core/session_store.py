"""In-memory session store.

A session groups a user's conversation turns under their user id. The store
is an ordinary object owned by the application; swap it for a shared or
database-backed implementation with the same methods if sessions must
outlive the process.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from threading import Lock
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Turn:
    speaker: str  # "user" | "bot"
    text: str
    timestamp: datetime
    category: Optional[str] = None  # bot turns only


@dataclass
class Session:
    user_id: str
    created_at: datetime
    session_id: Optional[str] = None
    conversation_history: List[Turn] = field(default_factory=list)
    mood: Optional[str] = None
    risk_level: str = "low"
    last_category: Optional[str] = None
    consecutive_negative: int = 0
    mood_ratings: List[int] = field(default_factory=list)
    evicted: bool = False
    lock: Lock = field(default_factory=Lock, repr=False, compare=False)

    @property
    def last_activity(self) -> datetime:
        if self.conversation_history:
            return self.conversation_history[-1].timestamp
        return self.created_at

    def bot_turns(self) -> List[Turn]:
        return [t for t in self.conversation_history if t.speaker == "bot"]


class SessionStore:
    def __init__(self, clock=utcnow) -> None:
        self._sessions: Dict[str, Session] = {}
        self._lock = Lock()
        self._clock = clock

    def get(self, user_id: str) -> Session | None:
        with self._lock:
            return self._sessions.get(user_id)

    def create(self, user_id: str) -> Session:
        """Start a fresh session, replacing (and flagging) any existing one."""
        sess = Session(user_id=user_id, created_at=self._clock())
        with self._lock:
            replaced = self._sessions.get(user_id)
            if replaced is not None:
                replaced.evicted = True
            self._sessions[user_id] = sess
        return sess

    def get_or_create(self, user_id: str) -> Session:
        with self._lock:
            sess = self._sessions.get(user_id)
            if sess is None:
                sess = Session(user_id=user_id, created_at=self._clock())
                self._sessions[user_id] = sess
                logger.debug("Created session for user %s", user_id)
            return sess

    def delete(self, user_id: str) -> bool:
        with self._lock:
            sess = self._sessions.pop(user_id, None)
            if sess is not None:
                sess.evicted = True
        return sess is not None

    def user_ids(self) -> List[str]:
        with self._lock:
            return list(self._sessions)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def sweep(self, idle_threshold: timedelta, now: datetime | None = None) -> List[str]:
        """Remove sessions idle for longer than ``idle_threshold``.

        Works on a snapshot of the mapping. A session whose lock is held by an
        in-flight turn is skipped, and a session is only removed if the store
        still maps its user id to the same object.
        """
        cutoff = (now or self._clock()) - idle_threshold
        with self._lock:
            snapshot = list(self._sessions.items())

        evicted: List[str] = []
        for user_id, sess in snapshot:
            if not sess.lock.acquire(blocking=False):
                continue
            try:
                if sess.last_activity >= cutoff:
                    continue
                with self._lock:
                    if self._sessions.get(user_id) is not sess:
                        continue
                    del self._sessions[user_id]
                sess.evicted = True
                evicted.append(user_id)
            finally:
                sess.lock.release()

        for user_id in evicted:
            logger.info("Cleaning up idle session for user: %s", user_id)
        return evicted
