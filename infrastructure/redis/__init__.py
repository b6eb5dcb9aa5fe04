"""Redis infrastructure module."""

from infrastructure.redis.client import RedisClient
from infrastructure.redis.pool import BoundedConnectionPool, acquire_connection, new_pool

__all__ = [
    "RedisClient",
    "BoundedConnectionPool",
    "acquire_connection",
    "new_pool",
]
