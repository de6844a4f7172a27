from piimask.anonymization.models import Category


class AnonymizationError(Exception):
    """Raised when anonymization fails."""


class DetectionError(AnonymizationError):
    """Raised when a single detection pass cannot complete."""

    def __init__(self, category: Category, message: str) -> None:
        super().__init__(f"{category.value} detection failed: {message}")
        self.category = category


class OptionsValidationError(ValueError):
    """Raised when an options payload carries a non-boolean flag."""
