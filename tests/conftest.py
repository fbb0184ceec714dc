from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import fakeredis
import fakeredis.aioredis
import pytest


def _at(clock: str) -> datetime:
    hour, minute = (int(part) for part in clock.split(":"))
    return datetime.now().replace(hour=hour, minute=minute, second=0, microsecond=0)


@pytest.fixture
def at():
    """Build today's datetime at ``HH:MM``."""
    return _at


@pytest.fixture
def redis_mock():
    """Stand-in store that records every command issued to it"""
    return MagicMock()


@pytest.fixture
def async_redis_mock():
    return AsyncMock()


@pytest.fixture
def fake_redis():
    r = fakeredis.FakeRedis(decode_responses=True)
    yield r
    r.flushall()


@pytest.fixture
def fake_async_redis():
    return fakeredis.aioredis.FakeRedis(decode_responses=True)
