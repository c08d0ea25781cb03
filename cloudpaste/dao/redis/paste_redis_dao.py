"""Data Access Object (DAO) implementation for managing pastes in Redis

Each paste is a single Redis string holding its JSON document:

    SET <prefix>:pastes:<paste id> <json document> [EX <seconds until expiration>]

Expiration is delegated to Redis. Pastes without an expiration are stored
without a TTL.

Classes:
    PasteRedisDAO:
        DAO for storing and retrieving PasteModel in a Redis datastore.

Example:
    >>> from cloudpaste.models import PasteModel
    >>> from cloudpaste.dao.redis import PasteRedisDAO
    >>> from cloudpaste.utils import generate_paste_id

    >>> dao = PasteRedisDAO(prefix="cloudpaste:dev")
    >>> paste_id = generate_paste_id()
    >>> dao.insert(paste_id, PasteModel(content='Hello', unlisted=False))
    <PasteRedisDAO>

    >>> dao.get(paste_id).content
    'Hello'
"""

import math
import logging
from datetime import datetime, UTC

from beartype import beartype

from cloudpaste.constants import TTL
from cloudpaste.exceptions import UnsupportedTTLError
from cloudpaste.models import PasteModel, serialize_paste, deserialize_paste
from cloudpaste.dao.base import PasteBaseDAO
from cloudpaste.dao.redis.mixins import RedisClientMixin
from cloudpaste.dao.redis.helpers import handle_redis_errors
from cloudpaste.dao.exceptions import CorruptPasteError
from cloudpaste.utils.identifiers import parse_paste_id


logger = logging.getLogger(__name__)


def _seconds_until(expires_at: datetime) -> int:
    # Round up so Redis never evicts a paste before its expiration
    return math.ceil((expires_at - datetime.now(UTC)).total_seconds())


class PasteRedisDAO(RedisClientMixin, PasteBaseDAO):
    """Redis-based Data Access Object (DAO) for pastes

    Attributes (see RedisClientMixin):
        redis (KeyValueStore):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.

    Methods:
        insert(paste_id: str, paste: PasteModel, **kwargs) -> PasteRedisDAO:
            Store a paste with a TTL matching its expiration.
            Raises UnsupportedTTLError when less than 60 seconds are left.
            Raises DataStoreError on Redis failures.

        get(paste_id: str, **kwargs) -> PasteModel | None:
            Retrieve a paste. Malformed ids are rejected without a Redis round trip.
            Raises CorruptPasteError when the stored value isn't a paste document.
            Raises DataStoreError on Redis failures.

        delete(paste_id: str, **kwargs) -> bool:
            Remove a paste ahead of its expiration.
            Raises DataStoreError on Redis failures.
    """

    @handle_redis_errors
    @beartype
    def insert(self, paste_id: str, paste: PasteModel, **kwargs) -> 'PasteRedisDAO':
        """Insert a paste into Redis

        NOTE: the TTL is recomputed from `paste.expires_at` at write time, so the
              60 second floor is checked again here.

        Args:
            paste_id (str):
                Freshly generated 32 character hex identifier.
            paste (PasteModel):
                Paste record to store.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            PasteRedisDAO: self (for method chaining)

        Raises:
            ValueError:
                If `paste_id` is not a well-formed identifier.
            UnsupportedTTLError:
                If the paste expires in less than 60 seconds.
            DataStoreError:
                If a Redis error occurs.

        Example:
            >>> dao.insert('0f8fad5bd9cb469fa16570867728950e', PasteModel(content='Hello'))
            <PasteRedisDAO>
        """
        canonical_id = parse_paste_id(paste_id)
        if canonical_id is None:
            raise ValueError(f"Malformed paste id '{paste_id}'.")

        ttl = None
        if paste.expires_at is not None:
            ttl = _seconds_until(paste.expires_at)
            if ttl < TTL.MINIMUM:
                raise UnsupportedTTLError(ttl)

        self.redis.set(self.keys.paste_key(canonical_id), serialize_paste(paste), ex=ttl)
        logger.debug('Stored paste %s.', canonical_id, extra={'paste_id': canonical_id, 'ttl': ttl})
        return self

    @handle_redis_errors
    @beartype
    def get(self, paste_id: str, **kwargs) -> PasteModel | None:
        """Retrieve a stored paste by identifier

        Args:
            paste_id (str):
                Requested identifier, as taken from the URL.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            PasteModel | None:
                The paste if found. None if it doesn't exist (never created or
                expired) or if `paste_id` is malformed.

        Raises:
            CorruptPasteError:
                If the stored value is not a valid paste document.
            DataStoreError:
                If a Redis error occurs.

        Example:
            >>> dao.get('0f8fad5bd9cb469fa16570867728950e')
            PasteModel(content='Hello', unlisted=False, title=None, author=None, expires_at=None)
            >>> dao.get('not-an-id') is None
            True
        """
        canonical_id = parse_paste_id(paste_id)
        if canonical_id is None:
            return None

        raw = self.redis.get(self.keys.paste_key(canonical_id))
        if raw is None:
            return None

        try:
            return deserialize_paste(raw)
        except ValueError as e:
            raise CorruptPasteError(f"Stored paste '{canonical_id}' is not a valid paste document.") from e

    @handle_redis_errors
    @beartype
    def delete(self, paste_id: str, **kwargs) -> bool:
        """Delete a paste

        Args:
            paste_id (str):
                Identifier of the paste to delete.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            bool: True if a paste was deleted, False otherwise.

        Raises:
            DataStoreError:
                If a Redis error occurs.
        """
        canonical_id = parse_paste_id(paste_id)
        if canonical_id is None:
            return False
        return self.redis.delete(self.keys.paste_key(canonical_id)) > 0
