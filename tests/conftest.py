"""
Inventory store test fixtures
"""
from uuid import UUID

import pytest
from loguru import logger

from inventory_store.core.models import GameMode, Location, PlayerProfile, ProfileKey
from inventory_store.profile.cache import ProfileCache
from inventory_store.storage.flat_file import FlatFileDataSource


PLAYER_UUID = UUID("7c1c5a3e-9d1f-4f53-8f1e-2a0d6f6b9c01")


class FakeClock:
    """Manually advanced time source for cache expiry tests"""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache(clock):
    """Ten-minute expiry, ten entries"""
    return ProfileCache(max_entries=10, expire_after_access_seconds=600, clock=clock)


@pytest.fixture
def data_root(tmp_path):
    return tmp_path / "data"


@pytest.fixture
def store(data_root, cache):
    return FlatFileDataSource(data_root, cache=cache)


@pytest.fixture
def player():
    return PlayerProfile(
        uuid=PLAYER_UUID,
        name="Steve",
        game_mode=GameMode.SURVIVAL,
        location=Location("world", 12.5, 64.0, -30.25, yaw=90.0, pitch=-15.0),
        inventory={"0": {"type": "DIAMOND_SWORD", "amount": 1}},
        ender_chest={"3": {"type": "ENDER_PEARL", "amount": 16}},
        stats={"health": 20.0, "food": 18, "exp": 0.4, "level": 7},
    )


@pytest.fixture
def survival_key():
    return ProfileKey(PLAYER_UUID, GameMode.SURVIVAL, "default")


@pytest.fixture
def log_messages():
    """Collect loguru messages at WARNING and above"""
    messages = []
    handler_id = logger.add(lambda m: messages.append(m.record), level="WARNING")
    yield messages
    logger.remove(handler_id)
