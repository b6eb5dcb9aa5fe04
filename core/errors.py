"""
Exception hierarchy for the Redis demo client.

Transport and protocol failures raised by redis-py
(redis.exceptions.RedisError) are not wrapped; they reach the caller as-is.
"""

from typing import Optional


class RedisDemoError(Exception):
    """Base class for all errors raised by this project."""


class ConfigurationError(RedisDemoError):
    """Settings are inconsistent (e.g. pool bounds)."""


class ConnectionSetupError(RedisDemoError):
    """Initial connection could not be established. Unrecoverable."""


class StoreError(RedisDemoError):
    """Command-level failure raised by the store wrapper."""


class KeyNotFoundError(StoreError):
    """No value exists for the requested key."""

    def __init__(self, key: str, message: Optional[str] = None):
        self.key = key
        super().__init__(message or f"Key not found: {key}")


class ReplyConversionError(StoreError):
    """Reply could not be converted to the requested type."""

    def __init__(self, key: str, target: str, message: str):
        self.key = key
        self.target = target
        super().__init__(message)


class UnsupportedValueError(StoreError):
    """Value type cannot be sent as a command argument."""

    def __init__(self, key: str, message: str):
        self.key = key
        super().__init__(message)


class UnexpectedReplyError(StoreError):
    """Server answered with something other than the expected reply."""


class SerializationError(StoreError):
    """Record could not be serialized or deserialized."""


__all__ = [
    "RedisDemoError",
    "ConfigurationError",
    "ConnectionSetupError",
    "StoreError",
    "KeyNotFoundError",
    "ReplyConversionError",
    "UnsupportedValueError",
    "UnexpectedReplyError",
    "SerializationError",
]
