"""Shared Redis connection handling for paste DAOs.

Classes:
    RedisClientMixin:
        Owns the key-value store client and the paste key schema, and refuses
        to construct a DAO whose store doesn't answer PING.

Example:
    >>> class PasteRedisDAO(RedisClientMixin, PasteBaseDAO):
    ...     pass
    ...
    >>> dao = PasteRedisDAO(redis_host='redis.internal', prefix='cloudpaste:prod')
    >>> dao.keys.paste_key('0f8fad5bd9cb469fa16570867728950e')
    'cloudpaste:prod:pastes:0f8fad5bd9cb469fa16570867728950e'
"""

from typing import Optional

import redis

from cloudpaste.types import KeyValueStore
from cloudpaste.dao.exceptions import DataStoreError
from cloudpaste.dao.redis.helpers import redis_location
from cloudpaste.dao.redis.redis_key_schema import RedisKeySchema


class RedisClientMixin:
    """Store client and key schema for Redis-backed paste DAOs

    The `redis_*` keyword arguments match the keys of the lambda's AppConfig
    `redis` section once prefixed, so a DAO can be built straight from
    `load_config()` output.

    Attributes:
        redis (KeyValueStore):
            Client every paste read and write goes through.
        keys (RedisKeySchema):
            Builds `<prefix>:pastes:<id>` key names.
    """

    def __init__(
        self,
        redis_host: Optional[str] = 'localhost',
        redis_port: Optional[int] = 6379,
        redis_db: Optional[int] = 0,
        redis_decode_responses: Optional[bool] = True,
        redis_username: Optional[str] = None,
        redis_password: Optional[str] = None,
        redis_client: Optional[KeyValueStore] = None,
        prefix: Optional[str] = None,
    ):
        """Attach a store client and verify it is reachable

        Args:
            redis_host, redis_port, redis_db (Optional):
                Location of the Redis server. Port and db may arrive as strings
                from AppConfig and are converted to int.
            redis_decode_responses (Optional[bool]):
                Return str instead of bytes. Paste documents are JSON text.
            redis_username, redis_password (Optional[str]):
                ACL credentials, if the server requires them.
            redis_client (Optional[KeyValueStore]):
                Ready-made client (a redis.Redis or an in-memory stand-in).
                When given, the connection arguments above are ignored.
            prefix (Optional[str]):
                Key namespace, usually `<APP_NAME>:<APP_ENV>`.

        Raises:
            DataStoreError:
                If the store doesn't answer PING.
        """
        self.redis = redis_client if redis_client is not None else self._connect(
            host=redis_host,
            port=redis_port,
            db=redis_db,
            decode_responses=redis_decode_responses,
            username=redis_username,
            password=redis_password,
        )
        self.keys = RedisKeySchema(prefix=prefix)

        self._healthcheck()

    @staticmethod
    def _connect(*, host, port, db, decode_responses, username, password) -> redis.Redis:
        return redis.Redis(
            host=host,
            port=int(port),
            db=int(db),
            decode_responses=decode_responses,
            username=username,
            password=password,
        )

    def _healthcheck(self, raise_error: bool = True) -> bool:
        """PING the store

        Returns False instead of raising when `raise_error` is off.
        """
        try:
            self.redis.ping()
        except redis.exceptions.RedisError as e:
            if not raise_error:
                return False
            location = redis_location(self.redis)
            raise DataStoreError(f"Can't connect to Redis at {location}. Check the provided configuration parameters.") from e
        return True
