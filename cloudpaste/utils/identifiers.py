"""Paste identifier generation and parsing

Paste identifiers are random version 4 UUIDs rendered as 32 lowercase hex
characters with no dashes. The same string is used as the data store key
component and as the URL path segment.

Functions:
    generate_paste_id() -> str:
        Generate a fresh, unguessable paste identifier.
    parse_paste_id(value: str) -> str | None:
        Return the canonical form of a well-formed identifier, None otherwise.

Example:
    >>> from cloudpaste.utils import generate_paste_id, parse_paste_id
    >>> paste_id = generate_paste_id()
    >>> len(paste_id)
    32
    >>> parse_paste_id(paste_id.upper()) == paste_id
    True
    >>> parse_paste_id('not-a-paste-id') is None
    True
"""

import re
import uuid


PASTE_ID_LENGTH = 32
PASTE_ID_PATTERN = re.compile(r'[0-9a-fA-F]{32}')


def generate_paste_id() -> str:
    # uuid4() draws its 122 random bits from os.urandom()
    return uuid.uuid4().hex


def parse_paste_id(value: str) -> str | None:
    """Validate and canonicalize a paste identifier

    Args:
        value (str):
            Candidate identifier, e.g. a URL path segment.

    Returns:
        str | None:
            Lowercase 32 character hex identifier, or None if `value` is not
            exactly 32 hex characters (such a value can never have been issued).

    Example:
        >>> parse_paste_id('0F8FAD5BD9CB469FA16570867728950E')
        '0f8fad5bd9cb469fa16570867728950e'
        >>> parse_paste_id('0f8fad5b-d9cb-469f-a165-70867728950e') is None
        True
    """
    if not isinstance(value, str) or not PASTE_ID_PATTERN.fullmatch(value):
        return None
    return value.lower()
