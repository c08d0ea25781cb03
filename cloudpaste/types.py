from typing import Any, Protocol


# Type aliases for Python dictionaries
type LambdaEvent = dict[str, Any]
type LambdaContext = Any
type LambdaResponse = dict[str, Any]
type LambdaConfiguration = dict[str, Any]


class KeyValueStore(Protocol):
    """Subset of the redis.Redis client interface the paste DAO relies on."""

    def ping(self) -> Any: ...

    def get(self, name: str) -> Any: ...

    def set(self, name: str, value: str, ex: int | None = None) -> Any: ...

    def delete(self, *names: str) -> int: ...
