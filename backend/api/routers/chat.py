from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel, Field

from backend.event_log import add_event
from backend.services.analytics import record_turn, summarize_mood_ratings
from backend.services.engine import SupportEngine

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/chat")


class BotResponseRequest(BaseModel):
    user_id: str = Field(..., min_length=1)
    session_id: str = Field(..., min_length=1)
    message: str


class ResourceItemOut(BaseModel):
    name: str
    contact: str


class ResourceBundleOut(BaseModel):
    title: str
    items: List[ResourceItemOut]


class MoodCheckOut(BaseModel):
    question: str
    scale: List[int]


class BotReply(BaseModel):
    text: str
    resources: Optional[ResourceBundleOut] = None
    mood_check: Optional[MoodCheckOut] = None


class BotResponseEnvelope(BaseModel):
    user_message: str
    bot_response: BotReply
    timestamp: str


class MoodRatingRequest(BaseModel):
    user_id: str = Field(..., min_length=1)
    session_id: str = Field(..., min_length=1)
    mood_rating: int = Field(..., ge=1, le=10, description="Self-reported mood, 1 (worst) to 10 (best).")
    notes: str = ""


class SweepRequest(BaseModel):
    idle_hours: Optional[float] = Field(default=None, gt=0)


def _engine(request: Request) -> SupportEngine:
    return request.app.state.engine


@router.get("/welcome")
def welcome(request: Request) -> Dict[str, str]:
    return {"message": _engine(request).welcome_message()}


@router.post("/bot-response", response_model=BotResponseEnvelope)
def bot_response(payload: BotResponseRequest, request: Request) -> BotResponseEnvelope:
    engine = _engine(request)
    try:
        result = engine.handle_turn(payload.user_id, payload.session_id, payload.message)
    except Exception as exc:  # pragma: no cover - unexpected failures propagated
        logger.exception("Bot response failed for user %s", payload.user_id)
        add_event("chat.error", {"user_id": payload.user_id, "error": str(exc)})
        raise HTTPException(status_code=500, detail="Internal server error") from exc

    reply = result.response
    add_event(
        "chat.turn",
        {
            "user_id": payload.user_id,
            "session_id": payload.session_id,
            "category": result.analysis.category,
            "risk_level": result.analysis.risk_level,
            "reply_preview": reply.message[:160],
        },
    )
    record_turn(
        payload.user_id,
        result.analysis,
        reply,
        context={"history_length": result.history_length},
    )
    return BotResponseEnvelope(
        user_message=payload.message,
        bot_response=BotReply(**reply.to_dict()),
        timestamp=datetime.now(timezone.utc).isoformat(),
    )


@router.post("/mood", status_code=201)
def submit_mood(payload: MoodRatingRequest, request: Request) -> Dict[str, Any]:
    follow_up = _engine(request).submit_mood_rating(
        payload.user_id, payload.session_id, payload.mood_rating, payload.notes
    )
    add_event(
        "mood.rating",
        {"user_id": payload.user_id, "session_id": payload.session_id, "rating": payload.mood_rating},
    )
    return {"message": "Mood rating saved successfully", "follow_up": follow_up}


@router.get("/insights/{user_id}")
def insights(user_id: str, request: Request) -> Dict[str, Any]:
    result = _engine(request).get_insights(user_id)
    if result is None:
        raise HTTPException(status_code=404, detail="Chat session not found")
    return {"user_id": user_id, "insights": result.to_dict()}


@router.get("/history/{user_id}")
def history(user_id: str, request: Request, limit: Optional[int] = None) -> Dict[str, Any]:
    turns = _engine(request).get_history(user_id, limit)
    if turns is None:
        raise HTTPException(status_code=404, detail="Chat session not found")
    messages = [
        {
            "sender": t.speaker,
            "message": t.text,
            "timestamp": t.timestamp.isoformat(),
            "category": t.category,
        }
        for t in turns
    ]
    return {"user_id": user_id, "messages": messages, "count": len(messages)}


@router.get("/mood-analytics/{user_id}")
def mood_analytics(user_id: str, request: Request) -> Dict[str, Any]:
    sess = _engine(request).store.get(user_id)
    if sess is None:
        raise HTTPException(status_code=404, detail="Chat session not found")
    with sess.lock:
        ratings = list(sess.mood_ratings)
    return {"user_id": user_id, "analytics": summarize_mood_ratings(ratings)}


@router.post("/sweep")
def sweep(request: Request, payload: Optional[SweepRequest] = None) -> Dict[str, Any]:
    threshold = None
    if payload is not None and payload.idle_hours is not None:
        threshold = timedelta(hours=payload.idle_hours)
    evicted = _engine(request).sweep_idle_sessions(threshold)
    add_event("sessions.sweep", {"evicted": len(evicted)})
    return {"evicted": evicted, "count": len(evicted)}


__all__ = ["router"]
