"""Deterministic, pattern-based anonymizer for Russian free-form text.

Processing flow:
1. Resolve options (omitted switches keep their defaults).
2. Run every enabled detection rule in the fixed category order
   Names -> Emails -> Phones -> Dates -> Addresses -> IPs. Each pass sees
   the text already masked by the passes before it and replaces every
   non-overlapping match with the category marker.
3. Count markers in the final text to build the metadata.
"""

from __future__ import annotations

from collections.abc import Sequence

from piimask.anonymization.base import BaseAnonymizer
from piimask.anonymization.exceptions import AnonymizationError, DetectionError
from piimask.anonymization.metadata import calculate_metadata
from piimask.anonymization.models import (
    AnonymizationResult,
    AnonymizeMetadata,
    AnonymizeOptions,
    DetectionRule,
)
from piimask.anonymization.rules import DETECTION_RULES
from piimask.logging.logger import Log, LoggerProtocol


class Anonymizer(BaseAnonymizer):
    """Regex anonymizer. No NLP, no guessing beyond the rule patterns."""

    def __init__(
        self,
        rules: Sequence[DetectionRule] = DETECTION_RULES,
        timeout_seconds: float | None = None,
        logger: LoggerProtocol = Log,
    ) -> None:
        self._rules = tuple(rules)
        self._timeout_seconds = timeout_seconds
        self._logger = logger

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def anonymize(
        self,
        text: str,
        options: AnonymizeOptions | None = None,
    ) -> AnonymizationResult:
        """Replace PII in *text* with category markers.

        Raises:
            AnonymizationError: if any detection pass fails. Partial
                results are never returned.
        """
        try:
            return self._run(text, options if options is not None else AnonymizeOptions())
        except AnonymizationError:
            raise
        except Exception as exc:
            raise AnonymizationError(f"Anonymization failed: {exc}") from exc

    # ------------------------------------------------------------------
    # Pipeline steps
    # ------------------------------------------------------------------

    def _run(self, text: str, options: AnonymizeOptions) -> AnonymizationResult:
        if not text:
            return AnonymizationResult(anonymized_text="", metadata=AnonymizeMetadata())

        anonymized = text
        for rule in self._rules:
            if not options.is_enabled(rule.category):
                continue
            anonymized = self._apply_rule(rule, anonymized)

        metadata = calculate_metadata(anonymized)
        self._logger.debug(f"Anonymized: {metadata.total_replacements} PII spans replaced")
        return AnonymizationResult(anonymized_text=anonymized, metadata=metadata)

    def _apply_rule(self, rule: DetectionRule, text: str) -> str:
        try:
            replaced, count = rule.pattern.subn(
                rule.marker, text, timeout=self._timeout_seconds
            )
        except TimeoutError as exc:
            raise DetectionError(
                rule.category, f"timed out after {self._timeout_seconds}s"
            ) from exc
        except Exception as exc:
            raise DetectionError(rule.category, str(exc)) from exc

        self._logger.debug(f"{rule.category.value}: {count} matches replaced")
        return replaced
