from abc import ABC, abstractmethod

from piimask.anonymization.models import AnonymizationResult, AnonymizeOptions


class BaseAnonymizer(ABC):
    """Contract for all anonymization adapters."""

    @abstractmethod
    def anonymize(
        self,
        text: str,
        options: AnonymizeOptions | None = None,
    ) -> AnonymizationResult:
        """Replace PII in text with category markers.

        Args:
            text: Plain text, possibly containing Cyrillic.
            options: Per-category switches; None means all defaults.

        Returns:
            AnonymizationResult with anonymized text and per-category metadata.

        Raises:
            AnonymizationError: on any failure.
        """
