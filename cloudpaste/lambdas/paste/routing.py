"""Request routing for the paste lambda

The lambda owns a single resource family:

    /paste          collection endpoint (GET redirects to the index, POST creates)
    /paste/<id>     a single paste (GET only)

The bare root path `/` behaves like the collection endpoint.

Classes:
    RouteKind:
        The three things a request can resolve to.
    Route:
        Resolved route, with the requested paste identifier for fetches.

Functions:
    split_path(path: str | None) -> list[str]
        Split a request path into segments.
    resolve_route(method: str | None, path: str | None) -> Route
        Map method + path to a Route, or raise a RequestError.

Example:
    >>> resolve_route('POST', '/paste')
    Route(kind=<RouteKind.CREATE: 'create'>, paste_id=None)
    >>> resolve_route('GET', '/paste/0f8fad5bd9cb469fa16570867728950e').paste_id
    '0f8fad5bd9cb469fa16570867728950e'
"""

from dataclasses import dataclass
from enum import StrEnum

from cloudpaste.constants import PASTE_RESOURCE
from cloudpaste.exceptions import (
    PathNotUnderstoodError,
    RouteError,
    InvalidMethodError,
    NonexistentResourceError,
)


COLLECTION_METHODS = ('GET', 'POST')
PASTE_METHODS = ('GET',)


class RouteKind(StrEnum):
    INDEX = 'index'
    CREATE = 'create'
    FETCH = 'fetch'


@dataclass(frozen=True)
class Route:
    kind: RouteKind
    paste_id: str | None = None


def split_path(path: str | None) -> list[str]:
    """Split an absolute request path into segments

    A single trailing slash is ignored.

    Raises:
        PathNotUnderstoodError:
            If the path is missing or not absolute.

    Example:
        >>> split_path('/paste/')
        ['paste']
        >>> split_path('/')
        []
    """
    if not isinstance(path, str) or not path.startswith('/'):
        raise PathNotUnderstoodError(f'Path {path!r} is not an absolute URL path.')

    segments = path[1:].split('/')
    if segments[-1] == '':
        segments.pop()
    return segments


def resolve_route(method: str | None, path: str | None) -> Route:
    """Resolve a request to a route

    Args:
        method (str | None):
            HTTP method of the request.
        path (str | None):
            Request path (without query string).

    Returns:
        Route: resolved route.

    Raises:
        PathNotUnderstoodError:
            If the path can't be split into segments.
        RouteError:
            If the path is outside `/paste`.
        InvalidMethodError:
            If the method isn't supported by the matched route.
        NonexistentResourceError:
            If the path is deeper than `/paste/<id>`.
    """
    segments = split_path(path)
    method = (method or '').upper()

    if segments and segments[0] != PASTE_RESOURCE:
        raise RouteError(f'Path {path!r} is not handled by this service.')

    if len(segments) <= 1:
        if method == 'GET':
            return Route(kind=RouteKind.INDEX)
        if method == 'POST':
            return Route(kind=RouteKind.CREATE)
        raise InvalidMethodError(method, COLLECTION_METHODS)

    if len(segments) > 2:
        raise NonexistentResourceError(f'Path {path!r} does not name a resource.')

    paste_id = segments[1]
    if paste_id == '':
        # e.g. /paste//
        raise NonexistentResourceError(f'Path {path!r} does not name a resource.')
    if method != 'GET':
        raise InvalidMethodError(method, PASTE_METHODS)
    return Route(kind=RouteKind.FETCH, paste_id=paste_id)
