"""Abstract base class for paste data access objects (DAOs).

This class establishes a consistent contract for all paste DAO implementations,
regardless of the underlying storage mechanism (e.g., Redis, DynamoDB).

Responsibilities:
    - Provide an interface for inserting, retrieving and deleting PasteModel objects.
    - Standardize error handling across data store implementations.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from cloudpaste.models import PasteModel
        >>> from cloudpaste.dao.redis import PasteRedisDAO
        >>> from cloudpaste.utils import generate_paste_id

        >>> dao = PasteRedisDAO(...)
        >>> paste_id = generate_paste_id()
        >>> dao.insert(paste_id, PasteModel(content='Hello'))

        >>> dao.get(paste_id).content
        'Hello'
        >>> dao.get('nonsense') is None
        True
"""

from abc import ABC, abstractmethod

from cloudpaste.models import PasteModel


class PasteBaseDAO(ABC):
    """Interface for paste data access objects (DAOs).

    Methods:
        insert(paste_id: str, paste: PasteModel, **kwargs) -> PasteBaseDAO:
            Store a paste under a freshly generated identifier.
            Raises UnsupportedTTLError if the paste expires in less than 60 seconds.
            Raises DataStoreError on connection or write failure.

        get(paste_id: str, **kwargs) -> PasteModel | None:
            Retrieve a paste by identifier. Returns None if not found
            or if the identifier is malformed.
            Raises CorruptPasteError if the stored value can't be decoded.
            Raises DataStoreError on connection or read failure.

        delete(paste_id: str, **kwargs) -> bool:
            Remove a paste ahead of its expiration.
            Raises DataStoreError on connection or write failure.

    NOTE:
        - Pastes are immutable. There is no update operation.
        - Expiring pastes are removed by the data store itself.
    """

    @abstractmethod
    def insert(self, paste_id: str, paste: PasteModel, **kwargs) -> 'PasteBaseDAO':
        """Store a new paste.

        Args:
            paste_id (str):
                Freshly generated 32 character hex identifier.
            paste (PasteModel):
                Paste record to store.
            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            PasteBaseDAO: self (for method chaining)

        Raises:
            UnsupportedTTLError:
                If the paste would expire in less than 60 seconds.
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def get(self, paste_id: str, **kwargs) -> PasteModel | None:
        """Retrieve a paste by its identifier.

        Args:
            paste_id (str):
                Requested identifier, as taken from the URL.
            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            PasteModel | None: The paste if found, otherwise None.

        Raises:
            CorruptPasteError:
                If the stored value is not a valid paste document.
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def delete(self, paste_id: str, **kwargs) -> bool:
        """Delete a paste.

        Args:
            paste_id (str):
                Identifier of the paste to delete.
            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            bool: True if a paste was deleted, False if none existed.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass
