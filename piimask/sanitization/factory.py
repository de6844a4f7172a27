from piimask.config.settings import Settings
from piimask.sanitization.base import BaseHtmlSanitizer
from piimask.sanitization.bleach_adapter import BleachHtmlSanitizer
from piimask.sanitization.strip_adapter import StripTagsHtmlSanitizer


class HtmlSanitizerFactory:
    """Creates the correct HTML sanitizer based on settings."""

    ADAPTERS: dict[str, type[BaseHtmlSanitizer]] = {
        "bleach": BleachHtmlSanitizer,
        "strip": StripTagsHtmlSanitizer,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseHtmlSanitizer:
        backend = settings.html_sanitizer_backend.lower()
        adapter_cls = cls.ADAPTERS.get(backend)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown HTML sanitizer backend '{backend}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls()
