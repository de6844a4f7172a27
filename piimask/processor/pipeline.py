from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from piimask.anonymization.models import AnonymizationResult, AnonymizeOptions
from piimask.database.models import HistoryRecord


@dataclass(slots=True)
class PipelineContext:
    raw_text: object
    options: AnonymizeOptions = field(default_factory=AnonymizeOptions)
    sanitized_text: str = ""
    anonymization_result: AnonymizationResult | None = None
    metadata_payload: dict[str, int] = field(default_factory=dict)
    history_record: HistoryRecord | None = None
    status_message: str = ""
    error_message: str = ""


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
