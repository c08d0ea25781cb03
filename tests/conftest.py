from unittest.mock import MagicMock

import pytest
import redis


class InMemoryRedis:
    """In-memory stand-in for the subset of redis.Redis used by PasteRedisDAO.

    Records every command in `calls` and every TTL passed to SET in `ttls`.
    Expiry itself is not simulated.
    """

    def __init__(self):
        self.data: dict[str, str] = {}
        self.ttls: dict[str, int | None] = {}
        self.calls: list[tuple[str, str]] = []

    def ping(self) -> bool:
        return True

    def get(self, name: str) -> str | None:
        self.calls.append(('get', name))
        return self.data.get(name)

    def set(self, name: str, value: str, ex: int | None = None) -> bool:
        self.calls.append(('set', name))
        self.data[name] = value
        self.ttls[name] = ex
        return True

    def delete(self, *names: str) -> int:
        removed = 0
        for name in names:
            self.calls.append(('delete', name))
            if self.data.pop(name, None) is not None:
                self.ttls.pop(name, None)
                removed += 1
        return removed


@pytest.fixture
def app_prefix() -> str:
    return 'testapp:test'


@pytest.fixture
def memory_store() -> InMemoryRedis:
    return InMemoryRedis()


@pytest.fixture
def redis_client() -> redis.Redis:
    """Mock a Redis client."""
    client = MagicMock(spec=redis.Redis)
    client.connection_pool = MagicMock(
        spec=redis.ConnectionPool,
        connection_kwargs={'host': 'redis.test', 'port': 6379, 'db': 0},
    )
    client.get.return_value = None
    client.delete.return_value = 0
    return client
