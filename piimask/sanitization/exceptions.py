class SanitizationError(Exception):
    """Raised when an HTML sanitization backend fails."""
