from bleach.css_sanitizer import CSSSanitizer
from bleach.sanitizer import Cleaner

from piimask.sanitization.base import BaseHtmlSanitizer
from piimask.sanitization.elements import ForbiddenElementFilter
from piimask.sanitization.exceptions import SanitizationError
from piimask.sanitization.models import AllowlistConfig


class BleachHtmlSanitizer(BaseHtmlSanitizer):
    """Allow-list sanitizer built on bleach (html5lib parsing)."""

    def __init__(self) -> None:
        self._element_filter = ForbiddenElementFilter()

    def sanitize(self, html: str, config: AllowlistConfig) -> str:
        try:
            # bleach keeps the text of stripped tags; forbidden content goes first.
            without_forbidden = self._element_filter.strip(html, config.forbidden_tags)
            return self._build_cleaner(config).clean(without_forbidden)
        except SanitizationError:
            raise
        except Exception as exc:
            raise SanitizationError(f"bleach sanitization failed: {exc}") from exc

    @staticmethod
    def _build_cleaner(config: AllowlistConfig) -> Cleaner:
        # Cleaner instances are not thread-safe, so one is built per call.
        def allow_attribute(tag: str, name: str, value: str) -> bool:
            _ = tag
            return config.allows_attribute(name, value)

        return Cleaner(
            tags=config.effective_tags,
            attributes=allow_attribute,
            protocols=config.allowed_protocols,
            strip=True,
            strip_comments=True,
            css_sanitizer=CSSSanitizer(),
        )
