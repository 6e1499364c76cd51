"""Per-user session state updates driven by message analysis."""
from __future__ import annotations

from backend.core.session_store import Session, SessionStore
from backend.inference.classifier import Analysis
from backend.inference.lexicon import NEGATIVE_CATEGORIES


class SessionTracker:
    def __init__(self, store: SessionStore) -> None:
        self.store = store

    def get_or_create(self, user_id: str) -> Session:
        return self.store.get_or_create(user_id)

    @staticmethod
    def apply_analysis(session: Session, analysis: Analysis) -> Session:
        """Overwrite the mood fields and advance or reset the negative streak.

        Crisis counts toward the streak with the same weight as the other
        negative categories. Mutates ``session`` in place and returns it.
        """
        session.mood = analysis.mood
        session.risk_level = analysis.risk_level
        session.last_category = analysis.category
        if analysis.category in NEGATIVE_CATEGORIES:
            session.consecutive_negative += 1
        else:
            session.consecutive_negative = 0
        return session
