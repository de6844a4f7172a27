from piimask.anonymization.factory import AnonymizerFactory
from piimask.anonymization.models import AnonymizeOptions
from piimask.config.settings import Settings
from piimask.database.repositories.history_repository import HistoryRepository
from piimask.processor.metadata_extractor import MetadataExtractor
from piimask.processor.models import ProcessorResult
from piimask.processor.pipeline import PipelineContext, PipelineStep
from piimask.processor.steps import (
    AnonymizeStep,
    ExtractMetadataStep,
    PersistHistoryStep,
    ReportFailureStep,
    SanitizeInputStep,
    ValidateInputStep,
)


class Processor:
    """Runs an anonymization request through configured pipeline steps.

    Pipeline: validate -> sanitize -> anonymize -> metadata -> history.
    """

    def __init__(
        self,
        steps: list[PipelineStep],
        failed_step: PipelineStep | None = None,
    ) -> None:
        self._steps = steps
        self._failed_step = failed_step

    def process(
        self,
        text: object,
        options: AnonymizeOptions | None = None,
    ) -> ProcessorResult:
        context = PipelineContext(
            raw_text=text,
            options=options if options is not None else AnonymizeOptions(),
        )
        try:
            for step in self._steps:
                context = step.run(context)
        except Exception as exc:
            context.error_message = str(exc)
            if self._failed_step is not None:
                self._failed_step.run(context)
            raise

        anonymized_text = (
            context.anonymization_result.anonymized_text
            if context.anonymization_result is not None
            else context.sanitized_text
        )
        record = context.history_record
        return ProcessorResult(
            anonymized_text=anonymized_text,
            metadata=context.metadata_payload,
            history_id=record.id if record is not None else None,
            timestamp=record.timestamp if record is not None else None,
            status_message=context.status_message,
        )


def build_processor(
    settings: Settings,
    history_repo: HistoryRepository | None = None,
) -> Processor:
    """Build a Processor with all required adapters."""
    steps: list[PipelineStep] = [
        ValidateInputStep(
            min_chars=settings.min_input_chars,
            max_chars=settings.max_input_chars,
        ),
        SanitizeInputStep(),
        AnonymizeStep(anonymizer=AnonymizerFactory.create(settings)),
        ExtractMetadataStep(metadata_extractor=MetadataExtractor()),
    ]
    if settings.history_enabled:
        repo = history_repo if history_repo is not None else HistoryRepository()
        steps.append(PersistHistoryStep(history_repo=repo))
    return Processor(steps=steps, failed_step=ReportFailureStep())
