class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class InputValidationError(ProcessorError):
    """Raised when the submitted text fails the request constraints."""
