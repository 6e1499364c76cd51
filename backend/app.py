from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.core.config import settings
from backend.api import chat_router
from backend.event_log import get_events
from backend.services import IdleSessionSweeper, SupportEngine, aggregate_metrics

logger = logging.getLogger(__name__)

engine = SupportEngine(config=settings)


@asynccontextmanager
async def lifespan(app: FastAPI):
    sweeper = None
    if settings.sweep_interval_seconds > 0:
        sweeper = IdleSessionSweeper(app.state.engine, settings.sweep_interval_seconds)
        sweeper.start()
        logger.info("Idle session sweeper running every %ss", settings.sweep_interval_seconds)
    try:
        yield
    finally:
        if sweeper is not None:
            sweeper.stop()


app = FastAPI(title=settings.app_name, lifespan=lifespan)
app.state.engine = engine
app.include_router(chat_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.allow_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/api/health")
def health() -> dict:
    return {
        "status": "OK",
        "message": "Mental Health Chatbot API is running",
        "active_sessions": len(app.state.engine.store),
        "lexicon_version": app.state.engine.lexicon_version,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@app.get("/logs")
def get_logs(limit: int = 100, kind: str | None = None) -> dict:
    safe_limit = max(1, min(limit, 500))
    events = get_events(safe_limit, kind=kind)
    return {"count": len(events), "logs": events}


@app.get("/analytics")
def analytics_dashboard() -> dict:
    return aggregate_metrics()
