from piimask.anonymization.anonymizer import Anonymizer
from piimask.anonymization.base import BaseAnonymizer
from piimask.config.settings import Settings


class AnonymizerFactory:
    """Creates the configured anonymizer adapter."""

    @classmethod
    def create(cls, settings: Settings) -> BaseAnonymizer:
        """Create a regex anonymizer bounded by the configured per-pass timeout."""
        return Anonymizer(timeout_seconds=settings.detector_timeout_seconds)
