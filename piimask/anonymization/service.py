"""Primary anonymization entry point for request handlers and the CLI."""

from piimask.anonymization.anonymizer import Anonymizer
from piimask.anonymization.base import BaseAnonymizer
from piimask.anonymization.metadata import calculate_metadata
from piimask.anonymization.models import AnonymizationResult, AnonymizeOptions
from piimask.config.settings import Settings
from piimask.logging.logger import Log, LoggerProtocol


def anonymize(
    text: str,
    options: AnonymizeOptions | None = None,
    *,
    anonymizer: BaseAnonymizer | None = None,
    logger: LoggerProtocol = Log,
) -> AnonymizationResult:
    """Anonymize *text*, never raising.

    If the engine fails, the original text is returned unchanged with
    ``error`` set, and the failure is logged. Without an explicit engine each
    pass is bounded by the configured detector timeout.
    """
    source = text if isinstance(text, str) else ""
    engine = anonymizer
    if engine is None:
        engine = Anonymizer(
            timeout_seconds=Settings().detector_timeout_seconds, logger=logger
        )
    try:
        return engine.anonymize(source, options)
    except Exception as exc:
        logger.error(f"Anonymization failed, returning original text: {exc}")
        return AnonymizationResult(
            anonymized_text=source,
            metadata=calculate_metadata(source),
            error=str(exc),
        )
