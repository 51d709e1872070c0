import random

import pytest
from fastapi.testclient import TestClient

from matchmaker.app import create_app
from matchmaker.core.config import Settings
from matchmaker.repositories import MatchRepository, ProfileRepository
from matchmaker.services import MatchQueue


@pytest.fixture
def profiles():
    return ProfileRepository()


@pytest.fixture
def matches():
    return MatchRepository()


@pytest.fixture
def match_queue(profiles, matches):
    """MatchQueue with a seeded generator so failures are reproducible."""
    return MatchQueue(profiles, matches, rng=random.Random(42))


@pytest.fixture
def register(profiles):
    """Register profiles by name and return their ids::

        a, b = await register("A", "B")
    """

    async def _register(*names):
        return [(await profiles.register(name)).id for name in names]

    return _register


@pytest.fixture
def settings():
    return Settings(environment="test", enable_heartbeat=False, log_level="WARNING")


@pytest.fixture
def client(settings):
    # Context manager runs the lifespan, which builds the stores.
    with TestClient(create_app(settings)) as c:
        yield c
