import functools
import redis
from typing import Any
from collections.abc import Callable

from cloudpaste.dao.exceptions import DataStoreError


__all__ = []


def redis_location(client: Any) -> str:
    pool = getattr(client, 'connection_pool', None)
    info = getattr(pool, 'connection_kwargs', None) or {}
    return f"{info.get('host')}:{info.get('port')}/{info.get('db')}"


def handle_redis_errors[F](method: F) -> F:
    """Wrap Redis-interacting DAO methods to translate Redis errors

    Args:
        method (Callable[..., Any]):
            DAO method performing Redis operations which may raise redis.exceptions.RedisError.

    Returns:
        Callable[..., Any]:
            Wrapped method which raises DataStoreError on any Redis failure.

    Example:
        >>> @handle_redis_errors
        ... def get_raw(self, key):
        ...     return self.redis.get(key)
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except (redis.exceptions.ConnectionError, redis.exceptions.TimeoutError) as e:
            raise DataStoreError(f"Can't connect to Redis at {redis_location(self.redis)}.") from e
        except redis.exceptions.RedisError as e:
            raise DataStoreError(f'Redis at {redis_location(self.redis)} failed: {e}') from e

    return wrapper
