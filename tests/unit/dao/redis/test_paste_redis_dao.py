"""Unit tests for the PasteRedisDAO

Test coverage includes:

1. Insertion behavior
   - Ensures pastes are stored as JSON under the prefixed key.
   - Ensures the Redis TTL matches the paste expiration.
   - Ensures pastes without expiration are stored without TTL.
   - Confirms expirations less than 60 seconds away raise UnsupportedTTLError.
   - Ensures invalid types raise BeartypeCallHintParamViolation.
   - Confirms Redis errors raise DataStoreError.

2. Retrieval behavior
   - Ensures stored pastes are decoded into PasteModel.
   - Ensures missing pastes return None.
   - Ensures malformed ids return None without a Redis round trip.
   - Confirms undecodable values raise CorruptPasteError.
   - Confirms Redis errors raise DataStoreError.

3. Deletion behavior
"""

import json
from datetime import datetime, timedelta, UTC

import pytest
import redis
from beartype.roar import BeartypeCallHintParamViolation
from freezegun import freeze_time

from cloudpaste.exceptions import UnsupportedTTLError
from cloudpaste.models import PasteModel, serialize_paste
from cloudpaste.dao.exceptions import CorruptPasteError, DataStoreError
from cloudpaste.dao.redis import PasteRedisDAO


PASTE_ID = '0f8fad5bd9cb469fa16570867728950e'
PASTE_KEY = f'testapp:test:pastes:{PASTE_ID}'


@pytest.fixture
def dao(redis_client, app_prefix):
    return PasteRedisDAO(redis_client=redis_client, prefix=app_prefix)


@pytest.fixture
def memory_dao(memory_store, app_prefix):
    return PasteRedisDAO(redis_client=memory_store, prefix=app_prefix)


# -------------------------------
# 1. Insertion behavior
# -------------------------------


@freeze_time('2025-10-15 12:00:00')
def test_insert_expiring_paste(dao, redis_client):
    paste = PasteModel(content='Hello', expires_at=datetime(2025, 10, 15, 13, 0, 0, tzinfo=UTC))

    assert dao.insert(PASTE_ID, paste) is dao

    redis_client.set.assert_called_once_with(PASTE_KEY, '{"content":"Hello","unlisted":false,"exp":"2025-10-15T13:00:00Z"}', ex=3600)


@freeze_time('2025-10-15 12:00:00.250')
def test_insert_rounds_ttl_up(dao, redis_client):
    paste = PasteModel(content='Hello', expires_at=datetime(2025, 10, 15, 13, 0, 0, tzinfo=UTC))

    dao.insert(PASTE_ID, paste)

    assert redis_client.set.call_args.kwargs['ex'] == 3600


def test_insert_never_expiring_paste(dao, redis_client):
    paste = PasteModel(content='Hello', title='Title', author='Author', unlisted=True)

    dao.insert(PASTE_ID, paste)

    redis_client.set.assert_called_once_with(PASTE_KEY, serialize_paste(paste), ex=None)


def test_insert_canonicalizes_paste_id(dao, redis_client):
    dao.insert(PASTE_ID.upper(), PasteModel(content='Hello'))
    assert redis_client.set.call_args.args[0] == PASTE_KEY


@freeze_time('2025-10-15 12:00:00')
@pytest.mark.parametrize('seconds_left', [59, 1, 0, -3600])
def test_insert_with_unsupported_ttl(dao, redis_client, seconds_left):
    paste = PasteModel(content='Hello', expires_at=datetime(2025, 10, 15, 12, 0, 0, tzinfo=UTC) + timedelta(seconds=seconds_left))

    with pytest.raises(UnsupportedTTLError):
        dao.insert(PASTE_ID, paste)
    redis_client.set.assert_not_called()


def test_insert_with_malformed_paste_id(dao, redis_client):
    with pytest.raises(ValueError, match='Malformed paste id'):
        dao.insert('abc123', PasteModel(content='Hello'))
    redis_client.set.assert_not_called()


@pytest.mark.parametrize('args', [(PASTE_ID, 'Hello'), (PASTE_ID, {'content': 'Hello'}), (123, PasteModel(content='Hello'))])
def test_insert_with_invalid_types(dao, args):
    with pytest.raises(BeartypeCallHintParamViolation):
        dao.insert(*args)


def test_insert_with_redis_connection_error(dao, redis_client):
    redis_client.set.side_effect = redis.exceptions.ConnectionError('Connection error')

    with pytest.raises(DataStoreError, match="Can't connect to Redis at redis.test:6379/0."):
        dao.insert(PASTE_ID, PasteModel(content='Hello'))


# -------------------------------
# 2. Retrieval behavior
# -------------------------------


def test_get_paste(dao, redis_client):
    redis_client.get.return_value = json.dumps(
        {'title': 'Title', 'content': 'Hello', 'author': 'Author', 'unlisted': True, 'exp': '2025-10-15T13:00:00Z'}
    )

    paste = dao.get(PASTE_ID)

    redis_client.get.assert_called_once_with(PASTE_KEY)
    assert paste == PasteModel(
        content='Hello',
        unlisted=True,
        title='Title',
        author='Author',
        expires_at=datetime(2025, 10, 15, 13, 0, 0, tzinfo=UTC),
    )


def test_get_missing_paste(dao, redis_client):
    redis_client.get.return_value = None
    assert dao.get(PASTE_ID) is None


@pytest.mark.parametrize('paste_id', ['abc123', f'{PASTE_ID}0', PASTE_ID.replace('0', 'z'), '../../etc/passwd', ''])
def test_get_with_malformed_paste_id(dao, redis_client, paste_id):
    assert dao.get(paste_id) is None
    redis_client.get.assert_not_called()


@pytest.mark.parametrize(
    'stored',
    ['not json', '{"unlisted": false}', '[]', '{"content": "x", "unlisted": false, "exp": "0001-01-01T00:00:00+01:00"}'],
)
def test_get_corrupt_paste(dao, redis_client, stored):
    redis_client.get.return_value = stored

    with pytest.raises(CorruptPasteError, match=PASTE_ID):
        dao.get(PASTE_ID)


def test_get_with_redis_connection_error(dao, redis_client):
    redis_client.get.side_effect = redis.exceptions.ConnectionError('Connection error')

    with pytest.raises(DataStoreError):
        dao.get(PASTE_ID)


def test_insert_then_get_with_in_memory_store(memory_dao, memory_store):
    paste = PasteModel(content='Hello', title='Greeting')

    memory_dao.insert(PASTE_ID, paste)

    assert memory_dao.get(PASTE_ID) == paste
    assert memory_store.ttls[PASTE_KEY] is None


# -------------------------------
# 3. Deletion behavior
# -------------------------------


def test_delete_paste(memory_dao, memory_store):
    memory_dao.insert(PASTE_ID, PasteModel(content='Hello'))

    assert memory_dao.delete(PASTE_ID) is True
    assert memory_dao.get(PASTE_ID) is None
    assert memory_dao.delete(PASTE_ID) is False


def test_delete_with_malformed_paste_id(dao, redis_client):
    assert dao.delete('abc123') is False
    redis_client.delete.assert_not_called()


def test_delete_with_redis_error(dao, redis_client):
    redis_client.delete.side_effect = redis.exceptions.ResponseError('READONLY')

    with pytest.raises(DataStoreError):
        dao.delete(PASTE_ID)
