"""
Infrastructure Layer - External system integrations.

This layer contains implementations of interfaces defined in the interfaces/ layer.
Each subdirectory groups implementations by external dependency.

Structure:
- redis/  - Redis connection pool and command wrappers
"""

from .redis import BoundedConnectionPool, RedisClient, new_pool

__all__ = [
    "BoundedConnectionPool",
    "RedisClient",
    "new_pool",
]
