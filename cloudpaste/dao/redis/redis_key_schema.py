import functools
from collections.abc import Callable


__all__ = ['RedisKeySchema']  # hide internal decorator prefix_key from imports


def prefix_key(func: Callable) -> Callable:
    @functools.wraps(func)
    def wrapper(self, *args, **kwargs) -> str:
        key = func(self, *args, **kwargs)
        return f'{self.prefix}:{key}' if self.prefix is not None else key

    return wrapper


class RedisKeySchema:
    """Provide standardized Redis keys for storing pastes.

    An optional prefix can be provided to namespace all generated keys.
    It is highly encouraged to set a custom prefix for each app and environment,
    e.g. "cloudpaste:prod" or "cloudpaste:dev".

    Example:
        >>> RedisKeySchema(prefix='cloudpaste:dev').paste_key('0f8fad5bd9cb469fa16570867728950e')
        'cloudpaste:dev:pastes:0f8fad5bd9cb469fa16570867728950e'
    """

    def __init__(self, prefix: str | None = None):
        if prefix is not None and not isinstance(prefix, str):
            raise TypeError(f'Prefix must be of type string (given type: {type(prefix)}).')

        self.prefix = prefix

    @prefix_key
    def paste_key(self, paste_id: str) -> str:
        return f'pastes:{paste_id}'
