"""Keyword classification of a single user message.

Precedence lives in an ordered rule table: rules are evaluated top-down and
the first predicate that matches decides the category. Matching is plain
lower-cased substring containment, so short triggers such as "hi" can fire
inside longer words.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence, Tuple

from .lexicon import (
    ANXIETY, CRISIS, DEPRESSION, GENERAL, GREETING, HELP_SEEKING, POSITIVE, STRESS, TRIGGERS,
)

GREETING_MAX_LENGTH = 30


@dataclass(frozen=True)
class Analysis:
    category: str
    mood: str
    risk_level: str

    def to_dict(self) -> dict:
        return {"category": self.category, "mood": self.mood, "risk_level": self.risk_level}


# predicate receives (lowered text, original text)
Predicate = Callable[[str, str], bool]


@dataclass(frozen=True)
class Rule:
    name: str
    predicate: Predicate
    analysis: Analysis


def contains_any(triggers: Sequence[str]) -> Predicate:
    def _match(lowered: str, _raw: str) -> bool:
        return any(t in lowered for t in triggers)
    return _match


def short_greeting(triggers: Sequence[str], max_length: int) -> Predicate:
    def _match(lowered: str, raw: str) -> bool:
        return len(raw) < max_length and any(t in lowered for t in triggers)
    return _match


DEFAULT_ANALYSIS = Analysis(GENERAL, "neutral", "low")


def build_rules(greeting_max_length: int = GREETING_MAX_LENGTH) -> Tuple[Rule, ...]:
    return (
        Rule(CRISIS, contains_any(TRIGGERS[CRISIS]), Analysis(CRISIS, "crisis", "high")),
        Rule(ANXIETY, contains_any(TRIGGERS[ANXIETY]), Analysis(ANXIETY, "anxious", "medium")),
        Rule(DEPRESSION, contains_any(TRIGGERS[DEPRESSION]), Analysis(DEPRESSION, "depressed", "medium")),
        Rule(STRESS, contains_any(TRIGGERS[STRESS]), Analysis(STRESS, "stressed", "medium")),
        Rule(POSITIVE, contains_any(TRIGGERS[POSITIVE]), Analysis(POSITIVE, "positive", "low")),
        Rule(GREETING, short_greeting(TRIGGERS[GREETING], greeting_max_length),
             Analysis(GREETING, "neutral", "low")),
        Rule(HELP_SEEKING, contains_any(TRIGGERS[HELP_SEEKING]), Analysis(HELP_SEEKING, "neutral", "low")),
    )


DEFAULT_RULES = build_rules()


def classify(text: str, rules: Sequence[Rule] = DEFAULT_RULES) -> Analysis:
    """Return the analysis of the first rule that matches, or the general fallback."""
    raw = text or ""
    lowered = raw.lower()
    for rule in rules:
        if rule.predicate(lowered, raw):
            return rule.analysis
    return DEFAULT_ANALYSIS
