import random
from datetime import datetime, timedelta, timezone

import pytest

from backend.core.session_store import SessionStore
from backend.inference.responder import ResponseGenerator
from backend.services.engine import SupportEngine


class FakeClock:
    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock(datetime(2024, 3, 4, 9, 0, tzinfo=timezone.utc))


@pytest.fixture
def store(clock):
    return SessionStore(clock=clock)


@pytest.fixture
def generator():
    return ResponseGenerator(rng=random.Random(7))


@pytest.fixture
def engine(store, generator, clock):
    return SupportEngine(store=store, generator=generator, clock=clock)
