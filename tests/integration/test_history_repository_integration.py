from typing import Any

import psycopg
import pytest
from psycopg.rows import dict_row

from piimask.config.settings import Settings
from piimask.database.repositories.history_repository import HistoryRepository
from piimask.processor.processor import build_processor

pytestmark = pytest.mark.integration


class TestHistoryRepositoryIntegration:
    def test_save_persists_row(
        self,
        db_conn: psycopg.Connection[Any],
        integration_cleanup: list[str],
    ) -> None:
        metadata = {"namesCount": 1, "totalReplacements": 1}

        record = HistoryRepository().save("Иванов Иван пишет", "[ИМЯ] пишет", metadata)
        integration_cleanup.append(record.id)

        with db_conn.cursor(row_factory=dict_row) as cur:
            cur.execute(
                "SELECT original_text, anonymized_text, metadata, created_at "
                "FROM anonymize_history WHERE id = %s",
                (record.id,),
            )
            row = cur.fetchone()
        assert row is not None
        assert row["original_text"] == "Иванов Иван пишет"
        assert row["anonymized_text"] == "[ИМЯ] пишет"
        assert row["metadata"] == metadata
        assert row["created_at"] == record.timestamp

    def test_list_recent_returns_newest_first(self, integration_cleanup: list[str]) -> None:
        repo = HistoryRepository()
        first = repo.save("первый текст", "первый текст", {})
        second = repo.save("второй текст", "второй текст", {})
        integration_cleanup.extend([first.id, second.id])

        ids = [entry.id for entry in repo.list_recent(limit=50)]

        assert first.id in ids
        assert second.id in ids
        assert ids.index(second.id) < ids.index(first.id)

    def test_processor_saves_history(
        self,
        test_settings: Settings,
        integration_cleanup: list[str],
    ) -> None:
        settings = test_settings.model_copy(update={"history_enabled": True})
        processor = build_processor(settings)

        result = processor.process("Пишите на test@example.com")
        assert result.history_id is not None
        integration_cleanup.append(result.history_id)

        entries = HistoryRepository().list_recent(limit=50)
        entry = next(e for e in entries if e.id == result.history_id)
        assert entry.anonymized_text == "Пишите на [EMAIL]"
        assert entry.metadata["emailsCount"] == 1
