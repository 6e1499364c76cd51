#!/usr/bin/env python3

"""
Walk a short support conversation through the chat API from the CLI.

Steps:
1. Fetches the welcome message.
2. Sends a scripted series of messages to /api/chat/bot-response.
3. Submits a mood rating.
4. Displays the session insights and aggregated analytics.
"""

from __future__ import annotations

import json
import os
import uuid
from typing import Any, Dict

import requests

SCRIPT = [
    "hi",
    "I'm feeling really anxious about my presentation",
    "I'm still so nervous, I keep worrying",
    "the panic won't go away",
    "thanks, that actually helped, I feel a bit better",
]


def post_json(url: str, payload: Dict[str, Any]) -> requests.Response:
    try:
        return requests.post(url, json=payload, timeout=15)
    except requests.RequestException as exc:
        raise SystemExit(f"Request to {url} failed: {exc}")


def get_json(url: str) -> Dict[str, Any]:
    try:
        response = requests.get(url, timeout=15)
        response.raise_for_status()
        return response.json()
    except requests.RequestException as exc:
        raise SystemExit(f"Request to {url} failed: {exc}")


def main() -> None:
    base_url = os.getenv("MINDFULDESK_BASE_URL", "http://localhost:8000").rstrip("/")
    user_id = os.getenv("MINDFULDESK_USER_ID", f"demo-{uuid.uuid4().hex[:8]}")
    session_id = str(uuid.uuid4())

    print("[1/4] Welcome:", get_json(f"{base_url}/api/chat/welcome")["message"])

    print(f"[2/4] Sending {len(SCRIPT)} messages as {user_id}")
    for text in SCRIPT:
        resp = post_json(
            f"{base_url}/api/chat/bot-response",
            {"user_id": user_id, "session_id": session_id, "message": text},
        )
        if resp.status_code != 200:
            print(f"  ⚠ request failed ({resp.status_code}): {resp.text}")
            continue
        bot = resp.json()["bot_response"]
        print(f"  > {text}")
        print(f"  < {bot['text']}")
        if bot.get("resources"):
            print(f"    resources: {bot['resources']['title']}")
        if bot.get("mood_check"):
            print(f"    mood check: {bot['mood_check']['question']}")

    print("[3/4] Submitting mood rating 4")
    resp = post_json(
        f"{base_url}/api/chat/mood",
        {"user_id": user_id, "session_id": session_id, "mood_rating": 4},
    )
    print(f"  < {resp.json().get('follow_up', resp.text)}")

    print("[4/4] Insights and analytics")
    print(json.dumps(get_json(f"{base_url}/api/chat/insights/{user_id}"), indent=2))
    print(json.dumps(get_json(f"{base_url}/analytics"), indent=2))


if __name__ == "__main__":
    main()
