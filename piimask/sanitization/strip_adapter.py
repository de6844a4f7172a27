import re

from piimask.sanitization.base import BaseHtmlSanitizer
from piimask.sanitization.elements import ForbiddenElementFilter
from piimask.sanitization.exceptions import SanitizationError
from piimask.sanitization.models import AllowlistConfig

_TAG_RE = re.compile(r"<[^>]*>?")


class StripTagsHtmlSanitizer(BaseHtmlSanitizer):
    """Headless fallback: removes every tag, keeps no markup at all."""

    def __init__(self) -> None:
        self._element_filter = ForbiddenElementFilter()

    def sanitize(self, html: str, config: AllowlistConfig) -> str:
        try:
            return _TAG_RE.sub("", self._element_filter.strip(html, config.forbidden_tags))
        except Exception as exc:
            raise SanitizationError(f"tag stripping failed: {exc}") from exc
