from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class ProcessorResult:
    """Outcome of one anonymization request, shaped for the caller."""

    anonymized_text: str
    metadata: dict[str, int] = field(default_factory=dict)
    history_id: str | None = None
    timestamp: datetime | None = None
    status_message: str = ""

    def to_dict(self) -> dict[str, object]:
        return {
            "anonymizedText": self.anonymized_text,
            "metadata": dict(self.metadata),
            "historyId": self.history_id,
            "timestamp": self.timestamp.isoformat() if self.timestamp else None,
            "status": self.status_message,
        }
