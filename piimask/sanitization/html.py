from piimask.logging.logger import Log, LoggerProtocol
from piimask.sanitization.base import BaseHtmlSanitizer
from piimask.sanitization.bleach_adapter import BleachHtmlSanitizer
from piimask.sanitization.models import DEFAULT_ALLOWLIST, SAFETY_PLACEHOLDER, AllowlistConfig


def sanitize_html(
    html: str,
    config: AllowlistConfig | None = None,
    *,
    sanitizer: BaseHtmlSanitizer | None = None,
    logger: LoggerProtocol = Log,
) -> str:
    """Keep only allow-listed markup in *html*; never raises.

    A backend failure yields SAFETY_PLACEHOLDER instead of the input, since
    partially sanitized markup cannot be trusted.
    """
    if not isinstance(html, str) or not html:
        return ""
    engine = sanitizer if sanitizer is not None else BleachHtmlSanitizer()
    try:
        return engine.sanitize(html, config if config is not None else DEFAULT_ALLOWLIST)
    except Exception as exc:
        logger.error(f"HTML sanitization failed, content removed: {exc}")
        return SAFETY_PLACEHOLDER
