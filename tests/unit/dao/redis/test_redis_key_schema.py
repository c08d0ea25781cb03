"""Unit tests for the RedisKeySchema class in redis_key_schema.py.

Test coverage includes:

1. Paste key generation without prefix
2. Paste key generation with a custom prefix
3. Invalid prefix types raise TypeError
"""

import pytest

from cloudpaste.dao.redis.redis_key_schema import RedisKeySchema


PASTE_ID = '0f8fad5bd9cb469fa16570867728950e'


def test_paste_key_without_prefix():
    assert RedisKeySchema().paste_key(PASTE_ID) == f'pastes:{PASTE_ID}'


@pytest.mark.parametrize(
    'prefix, expected',
    [
        ('cloudpaste:prod', f'cloudpaste:prod:pastes:{PASTE_ID}'),
        ('testapp:test', f'testapp:test:pastes:{PASTE_ID}'),
        ('', f':pastes:{PASTE_ID}'),
    ],
)
def test_paste_key_with_prefix(prefix, expected):
    assert RedisKeySchema(prefix=prefix).paste_key(PASTE_ID) == expected


@pytest.mark.parametrize('prefix', [123, 4.5, ['cloudpaste'], {'app': 'cloudpaste'}])
def test_invalid_prefix_type(prefix):
    with pytest.raises(TypeError, match='Prefix must be of type string'):
        RedisKeySchema(prefix=prefix)
