from typing import Any

from psycopg.rows import dict_row
from psycopg.types.json import Jsonb

from piimask.database.connection import get_connection
from piimask.database.models import HistoryEntry, HistoryRecord

_CREATE_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS anonymize_history (
    id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
    original_text TEXT NOT NULL,
    anonymized_text TEXT NOT NULL,
    metadata JSONB NOT NULL DEFAULT '{}'::jsonb,
    created_at TIMESTAMPTZ NOT NULL DEFAULT now()
)
"""


class HistoryRepository:
    """Database operations for the anonymize_history table."""

    def ensure_schema(self) -> None:
        """Create the history table if it does not exist yet."""
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(_CREATE_TABLE_SQL)
            conn.commit()

    def save(
        self,
        original_text: str,
        anonymized_text: str,
        metadata: dict[str, Any],
    ) -> HistoryRecord:
        """Persist one anonymization and return its generated id and timestamp.

        Raises:
            ValueError: if either text is empty.
        """
        if not original_text or not anonymized_text:
            raise ValueError("original_text and anonymized_text must be non-empty")

        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    """
                    INSERT INTO anonymize_history
                        (original_text, anonymized_text, metadata)
                    VALUES (%s, %s, %s)
                    RETURNING id, created_at
                    """,
                    (original_text, anonymized_text, Jsonb(metadata)),
                )
                row = cur.fetchone()
            conn.commit()

        if row is None:
            raise RuntimeError("INSERT into anonymize_history returned no row")

        return HistoryRecord(id=str(row["id"]), timestamp=row["created_at"])

    def list_recent(self, limit: int = 10) -> list[HistoryEntry]:
        """Return the newest history entries first."""
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    """
                    SELECT id, original_text, anonymized_text, metadata, created_at
                    FROM anonymize_history
                    ORDER BY created_at DESC
                    LIMIT %s
                    """,
                    (limit,),
                )
                rows = cur.fetchall()

        return [
            HistoryEntry(
                id=str(row["id"]),
                original_text=row["original_text"],
                anonymized_text=row["anonymized_text"],
                metadata=dict(row["metadata"] or {}),
                created_at=row["created_at"],
            )
            for row in rows
        ]
