from piimask.anonymization.base import BaseAnonymizer
from piimask.anonymization.service import anonymize
from piimask.database.repositories.history_repository import HistoryRepository
from piimask.logging.logger import Log, LoggerProtocol
from piimask.processor.exceptions import InputValidationError
from piimask.processor.metadata_extractor import MetadataExtractor
from piimask.processor.pipeline import PipelineContext, PipelineStep
from piimask.sanitization.text import sanitize_input

FALLBACK_STATUS = "Anonymization failed, original text returned"


class ValidateInputStep(PipelineStep):
    def __init__(self, min_chars: int = 5, max_chars: int = 10000) -> None:
        self._min_chars = min_chars
        self._max_chars = max_chars

    def run(self, context: PipelineContext) -> PipelineContext:
        text = context.raw_text
        if not isinstance(text, str):
            raise InputValidationError("Text must be a string")
        if not text.strip():
            raise InputValidationError("Text must not be empty")
        if len(text) < self._min_chars:
            raise InputValidationError(
                f"Text must be at least {self._min_chars} characters long"
            )
        if len(text) > self._max_chars:
            raise InputValidationError(
                f"Text must be at most {self._max_chars} characters long"
            )
        return context


class SanitizeInputStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        context.sanitized_text = sanitize_input(context.raw_text)
        return context


class AnonymizeStep(PipelineStep):
    def __init__(self, anonymizer: BaseAnonymizer, logger: LoggerProtocol = Log) -> None:
        self._anonymizer = anonymizer
        self._logger = logger

    def run(self, context: PipelineContext) -> PipelineContext:
        result = anonymize(
            context.sanitized_text,
            context.options,
            anonymizer=self._anonymizer,
            logger=self._logger,
        )
        context.anonymization_result = result
        if result.error is not None:
            context.status_message = FALLBACK_STATUS
        self._logger.info(
            f"Anonymized {len(context.sanitized_text)} chars: "
            f"{result.metadata.total_replacements} replacements"
        )
        return context


class ExtractMetadataStep(PipelineStep):
    def __init__(self, metadata_extractor: MetadataExtractor) -> None:
        self._metadata_extractor = metadata_extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.anonymization_result is None:
            raise ValueError(
                "PipelineContext.anonymization_result must be set before metadata extraction"
            )
        context.metadata_payload = self._metadata_extractor.extract(
            context.anonymization_result.metadata
        )
        return context


class PersistHistoryStep(PipelineStep):
    def __init__(self, history_repo: HistoryRepository, logger: LoggerProtocol = Log) -> None:
        self._history_repo = history_repo
        self._logger = logger

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.anonymization_result is None:
            raise ValueError("PipelineContext.anonymization_result must be set before persist")
        if not context.sanitized_text or not context.anonymization_result.anonymized_text:
            self._logger.warning("Nothing left after sanitization, history entry skipped")
            return context
        context.history_record = self._history_repo.save(
            context.sanitized_text,
            context.anonymization_result.anonymized_text,
            context.metadata_payload,
        )
        self._logger.info(f"Saved anonymization history entry {context.history_record.id}")
        return context


class ReportFailureStep(PipelineStep):
    def __init__(self, logger: LoggerProtocol = Log) -> None:
        self._logger = logger

    def run(self, context: PipelineContext) -> PipelineContext:
        self._logger.error(f"Anonymization request failed: {context.error_message}")
        return context
