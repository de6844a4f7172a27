import os
from collections.abc import Generator
from typing import Any

import psycopg
import pytest

from piimask.config.settings import Settings
from piimask.database.connection import close_pool, get_connection, init_pool
from piimask.database.repositories.history_repository import HistoryRepository


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "piimask_test")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        init_pool(test_settings)
        with get_connection() as conn:
            conn.execute("SELECT 1")
    except Exception as e:
        close_pool()
        pytest.skip(f"PostgreSQL test DB not available: {e}. Set DB_* env to run.")
    try:
        HistoryRepository().ensure_schema()
        yield
    finally:
        close_pool()


@pytest.fixture
def db_conn(integration_pool: None) -> Generator[psycopg.Connection[Any], None, None]:
    with get_connection() as conn:
        yield conn


@pytest.fixture
def integration_cleanup(integration_pool: None) -> Generator[list[str], None, None]:
    history_ids: list[str] = []
    yield history_ids
    if not history_ids:
        return
    with get_connection() as conn:
        with conn.cursor() as cur:
            for history_id in history_ids:
                cur.execute("DELETE FROM anonymize_history WHERE id = %s", (history_id,))
        conn.commit()
