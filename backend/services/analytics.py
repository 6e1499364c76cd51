from __future__ import annotations

import hashlib
import logging
import os
from collections import Counter, deque
from datetime import datetime, timezone
from threading import Lock
from typing import Any, Deque, Dict, Iterable, List, Optional

from backend.inference.classifier import Analysis
from backend.inference.lexicon import CRISIS_RESOURCES, PROFESSIONAL_RESOURCES
from backend.inference.responder import BotResponse

logger = logging.getLogger(__name__)

_MAX_RECORDS = int(os.getenv("ANALYTICS_MAX_RECORDS", "1000"))
_records: Deque[Dict[str, Any]] = deque(maxlen=_MAX_RECORDS)
_lock = Lock()

MOOD_BANDS = (
    (2, "Very Low (1-2)"),
    (4, "Low (3-4)"),
    (6, "Neutral (5-6)"),
    (8, "Good (7-8)"),
    (10, "Excellent (9-10)"),
)


def _hash_user(user_id: str) -> str:
    return hashlib.sha256(user_id.encode("utf-8")).hexdigest()[:16]


def record_turn(
    user_id: str,
    analysis: Analysis,
    response: BotResponse,
    context: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """Store an anonymized snapshot of a conversational turn."""
    resources_title = response.resources.title if response.resources else None
    entry = {
        "user_hash": _hash_user(user_id),
        "ts": datetime.now(timezone.utc).isoformat(),
        "category": analysis.category,
        "mood": analysis.mood,
        "risk_level": analysis.risk_level,
        "resources": resources_title,
        "mood_check": response.mood_check is not None,
        "escalated": resources_title in (CRISIS_RESOURCES.title, PROFESSIONAL_RESOURCES.title),
        "context": context or {},
    }
    with _lock:
        _records.append(entry)
    return entry


def reset() -> None:
    with _lock:
        _records.clear()


def aggregate_metrics() -> Dict[str, Any]:
    """Return lightweight aggregate analytics for dashboards."""
    with _lock:
        data = list(_records)

    if not data:
        return {
            "total_turns": 0,
            "sessions_tracked": 0,
            "category_counts": {},
            "risk_counts": {},
            "escalations": 0,
            "generated_at": datetime.now(timezone.utc).isoformat(),
        }

    categories: Counter[str] = Counter(item["category"] for item in data)
    risks: Counter[str] = Counter(item["risk_level"] for item in data)

    return {
        "total_turns": len(data),
        "sessions_tracked": len({item["user_hash"] for item in data}),
        "category_counts": dict(categories),
        "risk_counts": dict(risks),
        "escalations": sum(1 for item in data if item["escalated"]),
        "generated_at": datetime.now(timezone.utc).isoformat(),
    }


def summarize_mood_ratings(ratings: Iterable[int]) -> Dict[str, Any]:
    values: List[int] = list(ratings)
    distribution = {label: 0 for _, label in MOOD_BANDS}
    for rating in values:
        for upper, label in MOOD_BANDS:
            if rating <= upper:
                distribution[label] += 1
                break
    average = round(sum(values) / len(values), 2) if values else 0.0
    return {"average_mood": average, "total_entries": len(values), "mood_distribution": distribution}


__all__ = ["record_turn", "aggregate_metrics", "summarize_mood_ratings", "reset"]
