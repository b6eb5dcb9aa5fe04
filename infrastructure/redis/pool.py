"""
Redis connection pool bounded by idle and total connection counts.

redis-py's ConnectionPool only caps the total number of connections
(max_connections). BoundedConnectionPool additionally caps how many released
connections stay open: anything above max_idle is disconnected on release.
"""

from typing import Optional

from redis import ConnectionPool, Redis
from redis.exceptions import RedisError

from core.config import Settings, get_settings
from core.errors import ConfigurationError, ConnectionSetupError
from core.logger import logger
from core.messages import ErrorMessages, LogMessages


class BoundedConnectionPool(ConnectionPool):
    """
    ConnectionPool with a maximum number of idle connections.

    Args:
        max_idle: Connections kept open after release
        max_connections: Total connections the pool may create (max active)
        **connection_kwargs: Passed to every Connection (host, port, db, ...)
    """

    def __init__(self, max_idle: int, max_connections: int, **connection_kwargs):
        if max_idle <= 0 or max_connections <= 0:
            raise ConfigurationError(
                ErrorMessages.POOL_BOUNDS_NOT_POSITIVE.format(
                    max_idle=max_idle, max_active=max_connections
                )
            )
        if max_idle > max_connections:
            raise ConfigurationError(
                ErrorMessages.POOL_IDLE_ABOVE_ACTIVE.format(
                    max_idle=max_idle, max_active=max_connections
                )
            )
        super().__init__(max_connections=max_connections, **connection_kwargs)
        self.max_idle = max_idle

    @property
    def max_active(self) -> int:
        return self.max_connections

    def idle_count(self) -> int:
        """Number of open connections waiting in the pool."""
        with self._lock:
            return len(self._available_connections)

    def release(self, connection) -> None:
        super().release(connection)
        self._trim_idle()

    def _trim_idle(self) -> None:
        dropped = []
        with self._lock:
            # Oldest first; get_connection() pops from the end
            while len(self._available_connections) > self.max_idle:
                dropped.append(self._available_connections.pop(0))
                self._created_connections -= 1

        for connection in dropped:
            connection.disconnect()

        if dropped:
            logger.debug(
                LogMessages.POOL_IDLE_TRIMMED.format(
                    count=len(dropped), max_idle=self.max_idle
                )
            )


def new_pool(settings: Optional[Settings] = None) -> BoundedConnectionPool:
    """
    Create the connection pool from settings.

    Args:
        settings: Settings instance (uses cached settings if not provided)

    Returns:
        BoundedConnectionPool; no connection is opened yet
    """
    settings = settings or get_settings()
    settings.validate_pool_bounds()

    pool = BoundedConnectionPool(
        max_idle=settings.redis_max_idle,
        max_connections=settings.redis_max_active,
        host=settings.redis_host,
        port=settings.redis_port,
        db=settings.redis_db,
        password=settings.redis_password if settings.redis_password else None,
        socket_timeout=settings.redis_socket_timeout,
        socket_connect_timeout=settings.redis_socket_connect_timeout,
    )
    logger.info(
        LogMessages.POOL_CREATED.format(
            host=settings.redis_host,
            port=settings.redis_port,
            db=settings.redis_db,
            max_idle=settings.redis_max_idle,
            max_active=settings.redis_max_active,
        )
    )
    return pool


def acquire_connection(pool: ConnectionPool) -> Redis:
    """
    Take one connection out of the pool and hold it.

    The returned client sends every command over that single connection
    until close() hands it back to the pool.

    Raises:
        ConnectionSetupError: If the connection cannot be established
    """
    kwargs = pool.connection_kwargs
    try:
        client = Redis(connection_pool=pool, single_connection_client=True)
    except RedisError as e:
        raise ConnectionSetupError(
            ErrorMessages.CONNECTION_SETUP_FAILED.format(
                host=kwargs.get("host"), port=kwargs.get("port"), error=e
            )
        ) from e

    logger.debug(LogMessages.CONNECTION_ACQUIRED)
    return client
