"""Create-paste form parsing and validation

Functions:
    parse_form(event: dict) -> dict[str, str]
        Decode a form-urlencoded request body (first value wins per field).
    validate_paste_form(form: dict[str, str], settings: PasteSettings) -> NewPasteModel
        Validate form fields and build a NewPasteModel.
    new_paste_from_event(event: dict, settings: PasteSettings) -> NewPasteModel
        Both of the above.

Form fields:
    paste-title     optional, empty means untitled
    paste-author    optional, empty means anonymous
    paste-content   required, non-empty
    expiration      required, one of "1 hour", "24 hours", "Never"
    privacy         required, one of "Public", "Unlisted"
"""

import base64
import binascii
from urllib.parse import parse_qs

from cloudpaste.constants import Form, FORM_CONTENT_TYPE, EXPIRATION_CHOICES, NEVER_EXPIRE, PRIVACY_CHOICES
from cloudpaste.exceptions import ContentTypeError, MissingFormValueError, InvalidExpirationError, InvalidPrivacyError
from cloudpaste.models import NewPasteModel
from cloudpaste.types import LambdaEvent
from cloudpaste.utils.config import PasteSettings
from cloudpaste.utils.helpers import get_header


def _request_body(event: LambdaEvent) -> str:
    body = event.get('body') or ''
    if event.get('isBase64Encoded'):
        try:
            return base64.b64decode(body, validate=True).decode('utf-8')
        except (binascii.Error, UnicodeDecodeError) as e:
            raise ContentTypeError('Request body is not valid base64 encoded UTF-8.') from e
    return body


def parse_form(event: LambdaEvent) -> dict[str, str]:
    """Decode the form-urlencoded body of an API Gateway event

    Raises:
        ContentTypeError:
            If the Content-Type isn't exactly application/x-www-form-urlencoded.
    """
    content_type = get_header(event, 'Content-Type')
    if content_type != FORM_CONTENT_TYPE:
        raise ContentTypeError(f'Expected Content-Type {FORM_CONTENT_TYPE} (given: {content_type}).')

    fields = parse_qs(_request_body(event), keep_blank_values=True)
    return {name: values[0] for name, values in fields.items()}


def validate_paste_form(form: dict[str, str], settings: PasteSettings) -> NewPasteModel:
    """Validate create-paste form fields

    Args:
        form (dict[str, str]):
            Decoded form fields.
        settings (PasteSettings):
            Deployment policy (decides whether "Never" is accepted).

    Returns:
        NewPasteModel: validated creation request.

    Raises:
        MissingFormValueError:
            If `paste-content`, `expiration` or `privacy` is absent (or content is empty).
        InvalidExpirationError:
            If `expiration` isn't an allowed choice, or is "Never" while never-expiring
            pastes are disabled.
        InvalidPrivacyError:
            If `privacy` isn't an allowed choice.

    Example:
        >>> validate_paste_form(
        ...     {'paste-content': 'Hello', 'expiration': '1 hour', 'privacy': 'Public'},
        ...     PasteSettings(base_url='https://paste.example.com'),
        ... )
        NewPasteModel(content='Hello', unlisted=False, title=None, author=None, ttl=3600)
    """
    title = form.get(Form.TITLE) or None
    author = form.get(Form.AUTHOR) or None

    content = form.get(Form.CONTENT)
    if not content:
        raise MissingFormValueError(Form.CONTENT)

    expiration = form.get(Form.EXPIRATION)
    if expiration is None:
        raise MissingFormValueError(Form.EXPIRATION)
    if expiration not in EXPIRATION_CHOICES:
        raise InvalidExpirationError(f"invalid expiration '{expiration}'")
    if expiration == NEVER_EXPIRE and not settings.allow_never_expire:
        raise InvalidExpirationError('pastes that never expire are disabled')

    privacy = form.get(Form.PRIVACY)
    if privacy is None:
        raise MissingFormValueError(Form.PRIVACY)
    if privacy not in PRIVACY_CHOICES:
        raise InvalidPrivacyError(f"invalid privacy '{privacy}'")

    return NewPasteModel(
        content=content,
        unlisted=PRIVACY_CHOICES[privacy],
        title=title,
        author=author,
        ttl=EXPIRATION_CHOICES[expiration],
    )


def new_paste_from_event(event: LambdaEvent, settings: PasteSettings) -> NewPasteModel:
    return validate_paste_form(parse_form(event), settings)
