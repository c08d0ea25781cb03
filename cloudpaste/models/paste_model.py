"""Paste data models and their persisted JSON encoding.

Classes:
    NewPasteModel:
        Validated paste creation request, before an identifier and an
        absolute expiration are assigned.
    PasteModel:
        Stored paste record, as written to and read from the data store.

Functions:
    serialize_paste(paste: PasteModel) -> str
        Encode a PasteModel as its canonical JSON document.
    deserialize_paste(raw: str | bytes) -> PasteModel
        Decode a JSON document into a PasteModel (raises ValueError if malformed).

Persisted document format (optional fields are omitted, never null):

    {
        "title": "My paste",
        "content": "Hello",
        "author": "anonymous",
        "unlisted": false,
        "exp": "2025-10-15T13:00:00Z"
    }

Example:
    >>> paste = PasteModel(content='Hello', unlisted=False)
    >>> serialize_paste(paste)
    '{"content":"Hello","unlisted":false}'
    >>> deserialize_paste(serialize_paste(paste)) == paste
    True
"""

import json
from dataclasses import dataclass
from datetime import datetime, UTC
from typing import Any

from cloudpaste.constants import UNTITLED_PASTE


# fmt: off
@dataclass(frozen=True)
class NewPasteModel:
    content: str                # Paste body (non-empty)
    unlisted: bool = False      # Hidden from any public listing
    title: str | None = None    # Optional title, empty titles are normalized to None
    author: str | None = None   # Optional author, empty authors are normalized to None
    ttl: int | None = None      # Requested time-to-live in seconds, None means never expires


@dataclass(frozen=True)
class PasteModel:
    content: str                        # Paste body
    unlisted: bool = False              # Hidden from any public listing
    title: str | None = None            # Optional title
    author: str | None = None           # Optional author
    expires_at: datetime | None = None  # Absolute expiration (UTC), None means never expires

    @property
    def display_title(self) -> str:
        return self.title if self.title else UNTITLED_PASTE
# fmt: on


def _format_timestamp(value: datetime) -> str:
    return value.astimezone(UTC).isoformat().replace('+00:00', 'Z')


def _parse_timestamp(value: Any) -> datetime:
    if not isinstance(value, str):
        raise ValueError(f"Field 'exp' must be a timestamp string (given type: {type(value)}).")
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    try:
        return parsed.astimezone(UTC)
    except OverflowError as e:
        raise ValueError(f"Field 'exp' is outside the supported date range (given value: {value!r}).") from e


def _optional_string(document: dict, field: str) -> str | None:
    value = document.get(field)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"Field '{field}' must be a string (given type: {type(value)}).")
    return value


def serialize_paste(paste: PasteModel) -> str:
    """Encode a paste as its canonical JSON document

    Field order is fixed (title, content, author, unlisted, exp) and absent
    optional fields are left out of the document.

    Args:
        paste (PasteModel):
            Paste record to encode.

    Returns:
        str: compact JSON document.
    """
    document: dict[str, Any] = {}
    if paste.title is not None:
        document['title'] = paste.title
    document['content'] = paste.content
    if paste.author is not None:
        document['author'] = paste.author
    document['unlisted'] = paste.unlisted
    if paste.expires_at is not None:
        document['exp'] = _format_timestamp(paste.expires_at)
    return json.dumps(document, separators=(',', ':'), ensure_ascii=False)


def deserialize_paste(raw: str | bytes) -> PasteModel:
    """Decode a JSON document into a paste record

    Unknown fields are ignored.

    Args:
        raw (str | bytes):
            JSON document as stored in the data store.

    Returns:
        PasteModel: decoded paste record.

    Raises:
        ValueError:
            If the document is not valid JSON or doesn't have the expected shape.
    """
    document = json.loads(raw)
    if not isinstance(document, dict):
        raise ValueError(f'Paste document must be a JSON object (given type: {type(document)}).')

    content = document.get('content')
    if not isinstance(content, str):
        raise ValueError("Paste document is missing string field 'content'.")
    unlisted = document.get('unlisted')
    if not isinstance(unlisted, bool):
        raise ValueError("Paste document is missing boolean field 'unlisted'.")

    exp = document.get('exp')
    return PasteModel(
        content=content,
        unlisted=unlisted,
        title=_optional_string(document, 'title'),
        author=_optional_string(document, 'author'),
        expires_at=None if exp is None else _parse_timestamp(exp),
    )
