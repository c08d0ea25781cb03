"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    DataStoreError:
        Raised when the data store fails (connection issues, timeouts, OOM, etc.).

    CorruptPasteError:
        Raised when a stored value is present but isn't a valid paste document.

Example:
    >>> from cloudpaste.dao.exceptions import DataStoreError
    >>> raise DataStoreError("Can't connect to Redis at localhost:6379/0.")
    Traceback (most recent call last):
        ...
    cloudpaste.dao.exceptions.DataStoreError: Can't connect to Redis at localhost:6379/0.
"""

from cloudpaste.exceptions import CloudPasteError


class DAOError(CloudPasteError):
    """Generic base class for DAO-related exceptions."""

    error_code = 'DATA_STORE_ERROR'


class DataStoreError(DAOError):
    """Raised when the data store encounters an error.

    Examples include connection issues, timeouts, and out-of-memory failures.
    """


class CorruptPasteError(DAOError):
    """Raised when a stored paste can't be decoded. Not retryable."""
