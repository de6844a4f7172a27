from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class HistoryRecord:
    """Identity of a saved anonymization, returned to the caller after saving."""

    id: str
    timestamp: datetime


@dataclass
class HistoryEntry:
    """Represents a row from the anonymize_history table."""

    id: str
    original_text: str
    anonymized_text: str
    metadata: dict[str, int] = field(default_factory=dict)
    created_at: datetime | None = None
