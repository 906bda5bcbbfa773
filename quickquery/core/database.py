"""Database connection management using psycopg connection pools."""

from __future__ import annotations

import logging

from psycopg_pool import AsyncConnectionPool, ConnectionPool

from quickquery.core.config import get_settings

_LOGGER = logging.getLogger(__name__)

_POOL: ConnectionPool | None = None
_ASYNC_POOL: AsyncConnectionPool | None = None


def get_pool() -> ConnectionPool:
    """Return a singleton connection pool."""
    global _POOL
    if _POOL is None:
        settings = get_settings()
        _POOL = ConnectionPool(
            conninfo=settings.database_url,
            min_size=settings.pool_min_size,
            max_size=settings.pool_max_size,
            timeout=settings.pool_timeout,
            open=False,
        )
    return _POOL


def init_pool() -> ConnectionPool:
    pool = get_pool()
    pool.open()
    _LOGGER.info("Connection pool opened", extra={"max_size": pool.max_size})
    return pool


def close_pool() -> None:
    global _POOL
    if _POOL is not None:
        _POOL.close()
        _POOL = None
        _LOGGER.info("Connection pool closed")


def get_async_pool() -> AsyncConnectionPool:
    """Return a singleton async connection pool."""
    global _ASYNC_POOL
    if _ASYNC_POOL is None:
        settings = get_settings()
        _ASYNC_POOL = AsyncConnectionPool(
            conninfo=settings.database_url,
            min_size=settings.pool_min_size,
            max_size=settings.pool_max_size,
            timeout=settings.pool_timeout,
            open=False,
        )
    return _ASYNC_POOL


async def init_async_pool() -> AsyncConnectionPool:
    pool = get_async_pool()
    await pool.open()
    _LOGGER.info("Async connection pool opened", extra={"max_size": pool.max_size})
    return pool


async def close_async_pool() -> None:
    global _ASYNC_POOL
    if _ASYNC_POOL is not None:
        await _ASYNC_POOL.close()
        _ASYNC_POOL = None
        _LOGGER.info("Async connection pool closed")
