from abc import ABC, abstractmethod

from piimask.sanitization.models import AllowlistConfig


class BaseHtmlSanitizer(ABC):
    """Contract for all HTML sanitization adapters."""

    @abstractmethod
    def sanitize(self, html: str, config: AllowlistConfig) -> str:
        """Remove markup not permitted by *config*.

        Args:
            html: Untrusted HTML fragment.
            config: Allow-list and deny-list to enforce.

        Returns:
            Sanitized HTML fragment.

        Raises:
            SanitizationError: if the backend fails for any reason.
        """
