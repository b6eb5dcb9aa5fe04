"""
Redis client wrapper for the demo commands.

Holds one connection taken from the pool and exposes PING, SET and GET
with reply conversion to the requested scalar type. A nil GET reply is
reported as KeyNotFoundError; transport errors from redis-py propagate
unmodified. No retry, no backoff.
"""

import re
from typing import Optional

from redis import ConnectionPool, Redis

from core.constants import PING_ACK
from core.errors import (
    KeyNotFoundError,
    ReplyConversionError,
    UnexpectedReplyError,
    UnsupportedValueError,
)
from core.logger import logger
from core.messages import ErrorMessages, LogMessages
from infrastructure.redis.pool import acquire_connection
from interfaces.key_value_store import IKeyValueStore, StoreValue
from models.schemas import User

# Signed base-10 integer, ASCII digits only, no padding or separators
INTEGER_REPLY = re.compile(rb"[+-]?[0-9]+")


class RedisClient(IKeyValueStore):
    """
    Redis implementation of IKeyValueStore.

    Args:
        client: redis.Redis bound to a single connection
                (see infrastructure.redis.pool.acquire_connection)
    """

    def __init__(self, client: Redis):
        self._client: Optional[Redis] = client

    @classmethod
    def from_pool(cls, pool: ConnectionPool) -> "RedisClient":
        """Acquire one connection from pool and wrap it."""
        return cls(acquire_connection(pool))

    def _get_client(self) -> Redis:
        if self._client is None:
            raise RuntimeError("RedisClient is closed")
        return self._client

    def ping(self) -> str:
        logger.debug(LogMessages.PING_SENT)
        # redis-py compares the reply against "PONG" itself
        if not self._get_client().ping():
            raise UnexpectedReplyError(
                ErrorMessages.PING_UNEXPECTED_REPLY.format(reply=False)
            )
        return PING_ACK

    def set(self, key: str, value: StoreValue) -> None:
        # redis-py rejects bool; store it as 1/0
        if isinstance(value, bool):
            value = int(value)
        elif not isinstance(value, (str, int, float, bytes)):
            raise UnsupportedValueError(
                key,
                ErrorMessages.VALUE_TYPE_UNSUPPORTED.format(
                    key=key, type_name=type(value).__name__
                ),
            )
        logger.debug(LogMessages.COMMAND_SENT.format(command="SET", key=key))
        self._get_client().set(key, value)

    def get_bytes(self, key: str) -> bytes:
        logger.debug(LogMessages.COMMAND_SENT.format(command="GET", key=key))
        value = self._get_client().get(key)

        if value is None:
            logger.debug(LogMessages.KEY_MISSING.format(key=key))
            raise KeyNotFoundError(key, ErrorMessages.KEY_NOT_FOUND.format(key=key))

        return value

    def get_string(self, key: str) -> str:
        value = self.get_bytes(key)
        try:
            return value.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ReplyConversionError(
                key, "str", ErrorMessages.REPLY_NOT_STRING.format(key=key, error=e)
            ) from e

    def get_int(self, key: str) -> int:
        value = self.get_bytes(key)
        # int() alone would also accept b" 1984\n" and b"1_984"
        if INTEGER_REPLY.fullmatch(value) is None:
            raise ReplyConversionError(
                key, "int", ErrorMessages.REPLY_NOT_INTEGER.format(key=key, value=value)
            )
        return int(value)

    def set_struct(self, key: str, user: User) -> None:
        self.set(key, user.to_json())

    def get_struct(self, key: str) -> User:
        return User.from_json(self.get_bytes(key))

    def close(self) -> None:
        """Hand the connection back to the pool."""
        if self._client is not None:
            self._client.close()
            self._client = None
            logger.debug(LogMessages.CONNECTION_RELEASED)
