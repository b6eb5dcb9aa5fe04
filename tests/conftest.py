import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Ensure project root is on sys.path so top-level packages import during tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def _to_reply(value):
    # Redis stores everything as bytes; mirror redis-py's encoder
    if isinstance(value, bytes):
        return value
    if isinstance(value, str):
        return value.encode("utf-8")
    return repr(value).encode("utf-8")


def make_fake_redis(data: dict = None) -> MagicMock:
    """MagicMock standing in for redis.Redis, backed by a dict."""
    data = {} if data is None else data
    fake = MagicMock(name="Redis")
    fake.data = data

    def _set(key, value, *args, **kwargs):
        data[key] = _to_reply(value)
        return True

    fake.set.side_effect = _set
    fake.get.side_effect = lambda key: data.get(key)
    fake.ping.return_value = True
    return fake


@pytest.fixture()
def fake_redis() -> MagicMock:
    return make_fake_redis()


@pytest.fixture()
def store(fake_redis):
    from infrastructure.redis.client import RedisClient

    client = RedisClient(fake_redis)
    yield client
    client.close()


@pytest.fixture()
def clean_container():
    from core.container import Container

    Container.clear()
    yield Container
    Container.clear()
