"""Paste expiration computation

Functions:
    compute_expiration(ttl: int | None, now: datetime) -> datetime | None:
        Turn a relative TTL into an absolute expiration timestamp.
    build_paste(new_paste: NewPasteModel, now: datetime) -> PasteModel:
        Prepare a stored paste record from a validated creation request.

Example:
    >>> from datetime import datetime, UTC
    >>> now = datetime(2025, 10, 15, 12, 0, 0, tzinfo=UTC)
    >>> compute_expiration(3600, now)
    datetime.datetime(2025, 10, 15, 13, 0, tzinfo=datetime.timezone.utc)
    >>> compute_expiration(None, now) is None
    True
    >>> compute_expiration(30, now)
    Traceback (most recent call last):
        ...
    cloudpaste.exceptions.UnsupportedTTLError: Unsupported TTL: 30 (must be >= 60 seconds).
"""

import logging
from datetime import datetime, timedelta

from cloudpaste.constants import TTL, TTL_OVERFLOWED
from cloudpaste.exceptions import UnsupportedTTLError
from cloudpaste.models import NewPasteModel, PasteModel


logger = logging.getLogger(__name__)


def compute_expiration(ttl: int | None, now: datetime) -> datetime | None:
    """Compute the absolute expiration of a paste

    NOTE: whether "never expires" (ttl=None) is acceptable is a policy decided
          before this point (see the create form validation).
    NOTE: a TTL that pushes the expiration past the representable datetime
          range makes the paste never expire. This is logged as TTL_OVERFLOWED.

    Args:
        ttl (int | None):
            Requested time-to-live in seconds. None means never expires.
        now (datetime):
            Creation time (timezone aware, UTC).

    Returns:
        datetime | None: `now + ttl`, or None if the paste never expires.

    Raises:
        UnsupportedTTLError:
            If `ttl` is below the minimum of 60 seconds.
    """
    if ttl is None:
        return None
    if ttl < TTL.MINIMUM:
        raise UnsupportedTTLError(ttl)

    try:
        return now + timedelta(seconds=ttl)
    except OverflowError:
        logger.warning(
            'Paste TTL overflows the datetime range. The paste will never expire.',
            extra={'event': TTL_OVERFLOWED, 'ttl': ttl},
        )
        return None


def build_paste(new_paste: NewPasteModel, now: datetime) -> PasteModel:
    return PasteModel(
        content=new_paste.content,
        unlisted=new_paste.unlisted,
        title=new_paste.title,
        author=new_paste.author,
        expires_at=compute_expiration(new_paste.ttl, now),
    )
