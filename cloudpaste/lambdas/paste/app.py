import json
import logging
from datetime import datetime, UTC
from email.utils import format_datetime
from typing import Any

from cloudpaste.dao.redis import PasteRedisDAO
from cloudpaste.dao.exceptions import DAOError
from cloudpaste.exceptions import (
    CloudPasteError,
    ConfigurationError,
    PathNotUnderstoodError,
    RouteError,
    InvalidMethodError,
    NonexistentResourceError,
    RequestError,
    UnsupportedTTLError,
)
from cloudpaste.models import PasteModel
from cloudpaste.utils import (
    load_config,
    app_prefix,
    paste_settings,
    PasteSettings,
    generate_paste_id,
    parse_paste_id,
    build_paste,
    base_url,
    get_paste_url,
    get_create_url,
    guarantee_500_response,
)
from cloudpaste.utils.templates import render_index, render_paste, render_not_found
from cloudpaste.lambdas.paste.forms import new_paste_from_event
from cloudpaste.lambdas.paste.routing import Route, RouteKind, resolve_route
from cloudpaste.lambdas.paste.constants import (
    INDEX_PAGE,
    INDEX_REDIRECT,
    PASTE_CREATED,
    PASTE_FOUND,
    PASTE_NOT_FOUND,
    INVALID_PASTE_ID,
)


logger = logging.getLogger(__name__)

LAMBDA_NAME = 'paste'
HTML_CONTENT_TYPE = 'text/html; charset=utf-8'

# Known error kinds -> status code. Checked in order, first match wins.
# The reported errorCode is the error's own `error_code`.
ERROR_STATUS_CODES: tuple[tuple[type[CloudPasteError], int], ...] = (
    (PathNotUnderstoodError, 500),
    (RouteError, 500),
    (InvalidMethodError, 405),
    (NonexistentResourceError, 404),
    (RequestError, 400),
    (UnsupportedTTLError, 400),
    (DAOError, 500),
    (ConfigurationError, 500),
)


def response_500(message: str | None = None, error_code: str | None = None) -> dict:
    base = 'Internal Server Error'
    body = {'message': base if not message else f'{base} ({message})'}
    if error_code:
        body['errorCode'] = error_code
    return {
        'statusCode': 500,
        'headers': {'Content-Type': 'application/json'},
        'body': json.dumps(body),
    }


def response_400(message: str | None = None, error_code: str | None = None) -> dict:
    base = 'Bad Request'
    body = {'message': base if not message else f'{base} ({message})'}
    if error_code:
        body['errorCode'] = error_code
    return {
        'statusCode': 400,
        'headers': {'Content-Type': 'application/json'},
        'body': json.dumps(body),
    }


def response_405(*, allowed: tuple[str, ...], message: str | None = None, error_code: str | None = None) -> dict:
    body = {'message': message or 'Method Not Allowed'}
    if error_code:
        body['errorCode'] = error_code
    return {
        'statusCode': 405,
        'headers': {
            'Content-Type': 'application/json',
            'Allow': ', '.join(allowed),
        },
        'body': json.dumps(body),
    }


def response_index(*, settings: PasteSettings, create_url: str) -> dict:
    return {
        'statusCode': 200,
        'headers': {'Content-Type': HTML_CONTENT_TYPE},
        'body': render_index(settings, create_url),
    }


def response_404() -> dict:
    return {
        'statusCode': 404,
        'headers': {'Content-Type': HTML_CONTENT_TYPE},
        'body': render_not_found(),
    }


def response_redirect(*, status_code: int, location: str) -> dict:
    return {
        'statusCode': status_code,
        'headers': {'Location': location},
        'body': '',  # no body needed for redirects
    }


def response_paste(*, paste: PasteModel, paste_id: str) -> dict:
    headers = {'Content-Type': HTML_CONTENT_TYPE}
    if paste.expires_at is not None:
        # Issued pastes never change, so they can be cached until they expire
        headers['Cache-Control'] = 'public, immutable'
        headers['Expires'] = format_datetime(paste.expires_at.astimezone(UTC), usegmt=True)
    return {
        'statusCode': 200,
        'headers': headers,
        'body': render_paste(paste, paste_id),
    }


def error_response(error: CloudPasteError) -> dict:
    """Map a known application error to its HTTP response

    Client errors are reported with their reason; server-side errors are
    reported opaquely.
    """
    error_code = error.error_code
    for kind, status_code in ERROR_STATUS_CODES:
        if not isinstance(error, kind):
            continue

        if status_code == 400:
            logger.info('%s Responding with 400.', error, extra={'event': error_code})
            return response_400(message=str(error), error_code=error_code)
        if status_code == 404:
            logger.info('Nonexistent resource requested. Responding with 404.', extra={'event': error_code})
            return response_404()
        if status_code == 405:
            logger.info('%s Responding with 405.', error, extra={'event': error_code})
            return response_405(allowed=error.allowed, error_code=error_code)

        logger.error('%s Responding with 500.', error, exc_info=error, extra={'event': error_code})
        return response_500(error_code=error_code)

    logger.error('Unrecognized application error. Responding with 500.', exc_info=error, extra={'event': error_code})
    return response_500(error_code=error_code)


def paste_dao() -> PasteRedisDAO:
    app_config = load_config(LAMBDA_NAME)
    logger.debug('Assuming Redis as the backend database for pastes')
    redis_config = {f'redis_{k}': v for k, v in app_config['redis'].items()}
    return PasteRedisDAO(**redis_config, prefix=app_prefix())


def index(event: dict, settings: PasteSettings) -> dict:
    request_root = base_url(event)
    request_url = f'{request_root}{event.get("path")}'.rstrip('/')

    # Never redirect a request to its own URL, serve the create form instead
    if request_url != settings.base_url:
        logger.debug('Redirecting client to index page. Responding with 301.', extra={'event': INDEX_REDIRECT})
        return response_redirect(status_code=301, location=settings.base_url)

    logger.debug('Serving index page. Responding with 200.', extra={'event': INDEX_PAGE})
    return response_index(settings=settings, create_url=get_create_url(request_root))


def create_paste(event: dict, settings: PasteSettings) -> dict:
    # 1- Validate the form before touching the data store
    new_paste = new_paste_from_event(event, settings)

    # 2- Assign identifier and absolute expiration
    paste_id = generate_paste_id()
    paste = build_paste(new_paste, datetime.now(UTC))

    # 3- Store paste (via DAO)
    paste_dao().insert(paste_id, paste)

    # 4- Redirect client to the new paste
    location = get_paste_url(paste_id, settings.base_url)
    logger.info(
        'Paste created. Responding with 303.',
        extra={'event': PASTE_CREATED, 'paste_id': paste_id, 'unlisted': paste.unlisted, 'expires_at': paste.expires_at},
    )
    return response_redirect(status_code=303, location=location)


def fetch_paste(route: Route) -> dict:
    # 1- Malformed identifiers were never issued, don't bother the data store
    paste_id = parse_paste_id(route.paste_id)
    if paste_id is None:
        logger.info('Malformed paste id requested. Responding with 404.', extra={'event': INVALID_PASTE_ID})
        return response_404()

    # 2- Get paste from database
    paste = paste_dao().get(paste_id)
    if paste is None:
        logger.info('Paste not found in database. Responding with 404.', extra={'event': PASTE_NOT_FOUND, 'paste_id': paste_id})
        return response_404()

    # 3- Render paste
    logger.info('Paste found. Responding with 200.', extra={'event': PASTE_FOUND, 'paste_id': paste_id})
    return response_paste(paste=paste, paste_id=paste_id)


@guarantee_500_response
def lambda_handler(event: dict, context: Any) -> dict:
    """Handle incoming API Gateway requests for pastes

    Routes:
        GET  /  or  /paste      redirect to the index page (or render it when
                                the request already is the index URL)
        POST /paste             create a paste from form data
        GET  /paste/<id>        render a paste

    HTTP responses:
        200: Paste found (or index page)
            body: rendered HTML page
            headers: Cache-Control and Expires when the paste expires
        301: Index redirect
            headers:
                Location: base URL
        303: Paste created
            headers:
                Location: <base URL>/paste/<id>
        400: Bad client request
            message: cause of bad request (missing/invalid form field, bad content type, TTL)
            errorCode: e.g. MISSING_FORM_VALUE, INVALID_EXPIRATION, INVALID_PRIVACY
        404: Paste not found (or malformed id, or nonexistent resource)
            body: static HTML fallback page
        405: Method not supported by the route
            headers:
                Allow: supported methods
        500: Internal server error
            message: server experienced an internal error

    Args:
        event (dict):
            API Gateway event payload in Lambda Proxy format.
        context (Any):
            AWS Lambda context object (not used directly).

    Returns:
        dict:
            API Gateway-compatible response including statusCode, headers, and body.

    Example:
        >>> event = {'httpMethod': 'GET', 'path': '/paste/0f8fad5bd9cb469fa16570867728950e'}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        200
    """
    try:
        settings = paste_settings(event)
        route = resolve_route(event.get('httpMethod'), event.get('path'))

        if route.kind == RouteKind.INDEX:
            return index(event, settings)
        if route.kind == RouteKind.CREATE:
            return create_paste(event, settings)
        return fetch_paste(route)
    except CloudPasteError as error:
        return error_response(error)
