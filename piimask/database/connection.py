"""Process-wide PostgreSQL pool backing the anonymization history store."""

from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

import psycopg
from psycopg.conninfo import make_conninfo
from psycopg_pool import ConnectionPool

from piimask.config.settings import Settings
from piimask.logging.logger import Log

_pool: ConnectionPool | None = None


def build_conninfo(settings: Settings) -> str:
    """Connection string for the history database; values are quoted as needed."""
    return make_conninfo(
        host=settings.db_host,
        port=settings.db_port,
        dbname=settings.db_database,
        user=settings.db_username,
        password=settings.db_password,
        connect_timeout=settings.db_connect_timeout_seconds,
    )


def init_pool(settings: Settings) -> None:
    """Open the global pool. An already open pool is closed and replaced."""
    global _pool  # noqa: PLW0603
    close_pool()
    _pool = ConnectionPool(
        build_conninfo(settings),
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
        timeout=settings.db_pool_timeout_seconds,
        name="piimask-history",
        open=True,
    )
    Log.debug(f"History pool opened for {settings.db_host}:{settings.db_port}/{settings.db_database}")


def close_pool() -> None:
    """Close the global pool if one is open."""
    global _pool  # noqa: PLW0603
    if _pool is not None:
        _pool.close()
        _pool = None


@contextmanager
def get_connection() -> Generator[psycopg.Connection[Any], None, None]:
    """Yield a pooled connection. Caller manages commit/rollback."""
    if _pool is None:
        raise RuntimeError("Connection pool not initialized. Call init_pool() first.")
    with _pool.connection() as conn:
        yield conn
