"""Unit tests for paste identifier generation and parsing in identifiers.py."""

import re
import uuid

import pytest

from cloudpaste.utils.identifiers import generate_paste_id, parse_paste_id


def test_generate_paste_id_format():
    paste_id = generate_paste_id()

    assert re.fullmatch(r'[0-9a-f]{32}', paste_id)
    # Version 4 UUID with RFC 4122 variant
    parsed = uuid.UUID(hex=paste_id)
    assert parsed.version == 4
    assert parsed.variant == uuid.RFC_4122


def test_generate_paste_id_is_unique():
    ids = {generate_paste_id() for _ in range(1000)}
    assert len(ids) == 1000


@pytest.mark.parametrize(
    'value, expected',
    [
        ('0f8fad5bd9cb469fa16570867728950e', '0f8fad5bd9cb469fa16570867728950e'),
        ('0F8FAD5BD9CB469FA16570867728950E', '0f8fad5bd9cb469fa16570867728950e'),
        ('0f8fad5b-d9cb-469f-a165-70867728950e', None),
        ('0f8fad5bd9cb469fa16570867728950', None),
        ('0f8fad5bd9cb469fa16570867728950e0', None),
        ('0f8fad5bd9cb469fa16570867728950g', None),
        ('', None),
        ('index.html', None),
    ],
)
def test_parse_paste_id(value, expected):
    assert parse_paste_id(value) == expected
