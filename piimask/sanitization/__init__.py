from piimask.sanitization.base import BaseHtmlSanitizer
from piimask.sanitization.factory import HtmlSanitizerFactory
from piimask.sanitization.html import sanitize_html
from piimask.sanitization.models import DEFAULT_ALLOWLIST, SAFETY_PLACEHOLDER, AllowlistConfig
from piimask.sanitization.text import escape_text, sanitize_input, sanitize_text
from piimask.sanitization.uri import sanitize_uri

__all__ = [
    "DEFAULT_ALLOWLIST",
    "SAFETY_PLACEHOLDER",
    "AllowlistConfig",
    "BaseHtmlSanitizer",
    "HtmlSanitizerFactory",
    "escape_text",
    "sanitize_html",
    "sanitize_input",
    "sanitize_text",
    "sanitize_uri",
]
