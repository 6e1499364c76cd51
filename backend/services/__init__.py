"""Service layer modules for the support backend."""

from .analytics import aggregate_metrics, record_turn, summarize_mood_ratings
from .engine import IdleSessionSweeper, Insights, SupportEngine

__all__ = [
    "aggregate_metrics",
    "record_turn",
    "summarize_mood_ratings",
    "IdleSessionSweeper",
    "Insights",
    "SupportEngine",
]
