"""Template-based response generation.

Each category has a base response; escalation overrides swap in a more
resource-heavy response once a repetition or streak threshold is crossed.
Anxiety looks back at the two most recent bot turns, depression uses the
negative-streak counter, crisis uses neither.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Tuple

from backend.core.session_store import Session
from .classifier import Analysis
from .lexicon import (
    ANXIETY, ANXIETY_ESCALATION, CONTEXTUAL_FOLLOW_UP, CRISIS, CRISIS_MESSAGE, DEFAULT_LEXICON,
    DEPRESSION, DEPRESSION_ESCALATION, FALLBACK_MESSAGE, GENERAL, GREETING, HELP_SEEKING,
    HELP_SEEKING_MESSAGE, MOOD_ACKNOWLEDGMENTS, POSITIVE, SAFETY_QUESTION, STRESS,
    WELLBEING_QUESTION, Lexicon, ResourceBundle,
)

MOOD_SCALE: Tuple[int, ...] = tuple(range(1, 11))

ANXIETY_REPEAT_WINDOW = 2
DEPRESSION_ESCALATION_STREAK = 3
WELLNESS_SAFETY_NET_STREAK = 2


@dataclass(frozen=True)
class MoodCheckPrompt:
    question: str
    scale: Tuple[int, ...] = MOOD_SCALE

    def to_dict(self) -> Dict[str, Any]:
        return {"question": self.question, "scale": list(self.scale)}


SAFETY_CHECK = MoodCheckPrompt(SAFETY_QUESTION)
WELLBEING_CHECK = MoodCheckPrompt(WELLBEING_QUESTION)


@dataclass(frozen=True)
class BotResponse:
    message: str
    resources: Optional[ResourceBundle] = None
    mood_check: Optional[MoodCheckPrompt] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.message,
            "resources": self.resources.to_dict() if self.resources else None,
            "mood_check": self.mood_check.to_dict() if self.mood_check else None,
        }


class ResponseGenerator:
    def __init__(self, rng: random.Random | None = None, lexicon: Lexicon = DEFAULT_LEXICON) -> None:
        self.rng = rng or random.Random()
        self.lexicon = lexicon

    def _pick(self, pool: Sequence[str]) -> str:
        if not pool:
            pool = self.lexicon.responses.get(GENERAL, ())
        if not pool:
            return FALLBACK_MESSAGE
        return self.rng.choice(pool)

    def _response(self, category: str) -> str:
        return self._pick(self.lexicon.responses.get(category, ()))

    def _coping(self, category: str) -> str:
        return self._pick(self.lexicon.coping.get(category, ()))

    def _follow_up(self, category: str) -> str:
        return self._pick(self.lexicon.follow_ups.get(category, ()))

    @staticmethod
    def _recent_bot_categories(session: Session, n: int) -> list[Optional[str]]:
        return [t.category for t in session.bot_turns()[-n:]]

    def generate(self, analysis: Analysis, session: Session) -> BotResponse:
        """Build the reply for ``analysis`` given the already-updated ``session``.

        ``session.conversation_history`` is expected to hold the current user
        turn but not yet the bot turn for it.
        """
        category = analysis.category
        resources: Optional[ResourceBundle] = None
        mood_check: Optional[MoodCheckPrompt] = None

        if category == GREETING:
            message = self._response(GREETING)

        elif category == CRISIS:
            message = CRISIS_MESSAGE
            resources = self.lexicon.crisis_resources
            mood_check = SAFETY_CHECK

        elif category == ANXIETY:
            recent = self._recent_bot_categories(session, ANXIETY_REPEAT_WINDOW)
            if len(recent) == ANXIETY_REPEAT_WINDOW and all(c == ANXIETY for c in recent):
                message = " ".join((ANXIETY_ESCALATION, self._coping(ANXIETY), self._follow_up(ANXIETY)))
                resources = self.lexicon.professional_resources
            else:
                message = (self._response(ANXIETY)
                           + " Here's a technique that might help right now: "
                           + self._coping(ANXIETY))

        elif category == DEPRESSION:
            if session.consecutive_negative >= DEPRESSION_ESCALATION_STREAK:
                message = (DEPRESSION_ESCALATION + " " + self._response(DEPRESSION)
                           + " Let's try this gentle approach: " + self._coping(DEPRESSION))
                resources = self.lexicon.professional_resources
            else:
                message = (self._response(DEPRESSION)
                           + " Let's take this one step at a time: " + self._coping(DEPRESSION))

        elif category == STRESS:
            message = (self._response(STRESS)
                       + " Here's something you can try right now: " + self._coping(STRESS)
                       + " " + self._follow_up(STRESS))

        elif category == POSITIVE:
            message = self._response(POSITIVE)

        elif category == HELP_SEEKING:
            message = HELP_SEEKING_MESSAGE

        else:
            message = self._response(GENERAL)
            if len(session.conversation_history) > 2:
                message += " " + CONTEXTUAL_FOLLOW_UP

        if analysis.risk_level != "low" and mood_check is None:
            mood_check = WELLBEING_CHECK

        if (session.consecutive_negative >= WELLNESS_SAFETY_NET_STREAK
                and resources is None and category != POSITIVE):
            resources = self.lexicon.wellness_resources

        return BotResponse(message=message, resources=resources, mood_check=mood_check)


def acknowledge_mood_rating(rating: int) -> str:
    """Follow-up text for a submitted 1-10 mood rating."""
    for upper, text in MOOD_ACKNOWLEDGMENTS:
        if rating <= upper:
            return f"Thank you for sharing that you're feeling {rating}/10. {text}"
    return f"Thank you for sharing that you're feeling {rating}/10. {MOOD_ACKNOWLEDGMENTS[-1][1]}"
