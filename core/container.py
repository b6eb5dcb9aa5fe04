"""
Dependency Injection Container.

Wires the connection pool and the key-value store implementation.
"""

from typing import Any, Callable, Dict, Optional, Type, TypeVar

from core.config import Settings
from core.logger import logger

T = TypeVar("T")


class Container:
    """
    Simple Dependency Injection Container.

    Supports:
    - Singleton instances (register)
    - Factory functions (register_factory)
    - Interface resolution (resolve)
    """

    _instances: Dict[Type, Any] = {}
    _providers: Dict[Type, Callable[[], Any]] = {}
    _initialized: bool = False

    @classmethod
    def register(cls, interface: Type[T], instance: Any) -> None:
        """Register a singleton instance for an interface."""
        cls._instances[interface] = instance

    @classmethod
    def register_factory(cls, interface: Type[T], factory: Callable[[], T]) -> None:
        """
        Register a factory function for an interface.
        Factory is called each time resolve() is called.
        """
        cls._providers[interface] = factory

    @classmethod
    def resolve(cls, interface: Type[T]) -> T:
        """
        Resolve an interface to its implementation.

        Raises:
            KeyError: If no implementation is registered for the interface
        """
        if interface in cls._instances:
            return cls._instances[interface]
        if interface in cls._providers:
            return cls._providers[interface]()
        raise KeyError(f"No provider registered for {interface.__name__}")

    @classmethod
    def is_registered(cls, interface: Type[T]) -> bool:
        return interface in cls._instances or interface in cls._providers

    @classmethod
    def clear(cls) -> None:
        """Clear all registrations (useful for testing)."""
        cls._instances.clear()
        cls._providers.clear()
        cls._initialized = False

    @classmethod
    def is_initialized(cls) -> bool:
        return cls._initialized

    @classmethod
    def _mark_initialized(cls) -> None:
        cls._initialized = True


def bootstrap_container(settings: Optional[Settings] = None) -> None:
    """
    Initialize the dependency injection container.

    Registers:
    - BoundedConnectionPool (singleton, no connection opened yet)
    - IKeyValueStore -> RedisClient (factory, one pooled connection per resolve)

    This function is idempotent - calling it multiple times has no effect
    after the first successful initialization.
    """
    if Container.is_initialized():
        return

    logger.debug("Bootstrapping dependency injection container...")

    from infrastructure.redis.client import RedisClient
    from infrastructure.redis.pool import BoundedConnectionPool, new_pool
    from interfaces.key_value_store import IKeyValueStore

    try:
        pool = new_pool(settings)
    except Exception as e:
        logger.error(f"Failed to bootstrap container: {e}")
        raise

    Container.register(BoundedConnectionPool, pool)
    Container.register_factory(IKeyValueStore, lambda: RedisClient.from_pool(pool))
    logger.debug("Registered IKeyValueStore -> RedisClient (factory)")

    Container._mark_initialized()


def get_store():
    """
    Get an IKeyValueStore holding one connection from the shared pool.

    The caller owns the connection: use it as a context manager
    or call close().
    """
    from interfaces.key_value_store import IKeyValueStore

    if not Container.is_initialized():
        bootstrap_container()

    return Container.resolve(IKeyValueStore)
