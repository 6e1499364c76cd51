"""Application settings for the MindfulDesk support backend."""
import os
from dataclasses import dataclass
from typing import Optional


def _optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    return int(raw)


@dataclass(frozen=True)
class Settings:
    app_name: str = "MindfulDesk Support API"
    allow_origins: tuple[str, ...] = tuple(
        o.strip() for o in os.getenv("ALLOW_ORIGINS", "http://localhost:3000").split(",") if o.strip()
    )
    session_idle_hours: float = float(os.getenv("SESSION_IDLE_HOURS", "24"))
    sweep_interval_seconds: float = float(os.getenv("SWEEP_INTERVAL_SECONDS", "3600"))  # 0 disables
    greeting_max_length: int = int(os.getenv("GREETING_MAX_LENGTH", "30"))
    responder_seed: Optional[int] = _optional_int("RESPONDER_SEED")
    max_turns_kept: int = 200

settings = Settings()
