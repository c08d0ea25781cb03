class CloudPasteError(Exception):
    """Base exception for all application-specific errors.

    `error_code` is the stable code reported to clients as `errorCode`.
    Subclasses inherit the code of their parent unless they override it.
    """

    error_code = 'APPLICATION_ERROR'


class ConfigurationError(CloudPasteError):
    """Base exception for all configuration errors."""

    error_code = 'CONFIGURATION_ERROR'


class MissingEnvironmentVariableError(ConfigurationError):
    """Raised when a required environment variable is missing."""


class BadConfigurationError(ConfigurationError):
    """Raised when the application is configured with invalid parameters."""


class UnsupportedTTLError(CloudPasteError):
    """Raised when a paste TTL is below the store's minimum retention."""

    error_code = 'UNSUPPORTED_TTL'

    def __init__(self, ttl: int):
        self.ttl = ttl
        super().__init__(f'Unsupported TTL: {ttl} (must be >= 60 seconds).')


class RequestError(CloudPasteError):
    """Base exception for requests the router or form validator rejects."""

    error_code = 'BAD_REQUEST'


class PathNotUnderstoodError(RequestError):
    """Raised when the request path cannot be split into segments."""

    error_code = 'PATH_NOT_UNDERSTOOD'


class RouteError(RequestError):
    """Raised when the request path is outside the paste resource family."""

    error_code = 'ROUTE_ERROR'


class InvalidMethodError(RequestError):
    """Raised when the HTTP method is not supported by the matched route."""

    error_code = 'INVALID_METHOD'

    def __init__(self, method: str, allowed: tuple[str, ...]):
        self.method = method
        self.allowed = allowed
        super().__init__(f"Method {method} not allowed (allowed: {', '.join(allowed)}).")


class NonexistentResourceError(RequestError):
    """Raised when the path is understood but names no resource."""

    error_code = 'NONEXISTENT_RESOURCE'


class ContentTypeError(RequestError):
    """Raised when a paste is submitted without form encoding."""

    error_code = 'CONTENT_TYPE_ERROR'


class MissingFormValueError(RequestError):
    """Raised when a required form field is absent."""

    error_code = 'MISSING_FORM_VALUE'

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"missing '{field}' in form data")


class InvalidExpirationError(RequestError):
    """Raised when the expiration field is not one of the allowed choices."""

    error_code = 'INVALID_EXPIRATION'


class InvalidPrivacyError(RequestError):
    """Raised when the privacy field is not one of the allowed choices."""

    error_code = 'INVALID_PRIVACY'
