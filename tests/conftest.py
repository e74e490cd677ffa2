import random
from datetime import datetime, timezone

import pytest

from clubranking.models.player import Player
from clubranking.tournament import ClubDay

FIXED_TIME = datetime(2025, 3, 14, 19, 30, tzinfo=timezone.utc)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def clock():
    return lambda: FIXED_TIME


@pytest.fixture
def engine(rng, clock):
    return ClubDay(rng=rng, clock=clock)


@pytest.fixture
def alice():
    return Player.create("Alice")


@pytest.fixture
def bob():
    return Player.create("Bob")


@pytest.fixture
def five_players():
    return [Player.create(name) for name in ["Anna", "Ben", "Cleo", "Dirk", "Eva"]]
