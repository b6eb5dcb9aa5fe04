"""
Key-Value Store Interface - Abstract interface for the demo's command wrappers.
"""

from abc import ABC, abstractmethod
from typing import Union

from models.schemas import User

StoreValue = Union[str, int, float, bytes]


class IKeyValueStore(ABC):
    """
    Abstract interface for a key-value store holding one connection.

    Implementations:
    - infrastructure.redis.client.RedisClient

    Every method may raise the transport's own errors unmodified.
    """

    @abstractmethod
    def ping(self) -> str:
        """
        Send a liveness probe.

        Returns:
            The acknowledgement string ("PONG")

        Raises:
            UnexpectedReplyError: If the server answered something else
        """
        pass

    @abstractmethod
    def set(self, key: str, value: StoreValue) -> None:
        """Store a primitive or opaque byte payload under key."""
        pass

    @abstractmethod
    def get_string(self, key: str) -> str:
        """
        Retrieve the value of key as text.

        Raises:
            KeyNotFoundError: If key does not exist
            ReplyConversionError: If the value is not valid text
        """
        pass

    @abstractmethod
    def get_int(self, key: str) -> int:
        """
        Retrieve the value of key as an integer.

        Raises:
            KeyNotFoundError: If key does not exist
            ReplyConversionError: If the value is not an integer
        """
        pass

    @abstractmethod
    def get_bytes(self, key: str) -> bytes:
        """Retrieve the raw stored payload. Raises KeyNotFoundError if absent."""
        pass

    @abstractmethod
    def set_struct(self, key: str, user: User) -> None:
        """Serialize user to JSON and store it as an opaque value."""
        pass

    @abstractmethod
    def get_struct(self, key: str) -> User:
        """Read back and deserialize a record stored by set_struct."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Release the held connection."""
        pass

    def __enter__(self) -> "IKeyValueStore":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
