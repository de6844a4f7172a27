from unittest.mock import MagicMock, patch

import pytest

from piimask.sanitization.bleach_adapter import BleachHtmlSanitizer
from piimask.sanitization.elements import ForbiddenElementFilter
from piimask.sanitization.exceptions import SanitizationError
from piimask.sanitization.html import sanitize_html
from piimask.sanitization.models import DEFAULT_ALLOWLIST, SAFETY_PLACEHOLDER, AllowlistConfig
from piimask.sanitization.strip_adapter import StripTagsHtmlSanitizer


class TestAllowlistConfig:
    def test_forbidden_tags_win_over_allowed(self) -> None:
        config = AllowlistConfig(allowed_tags=frozenset({"b", "script"}))
        assert config.effective_tags == frozenset({"b"})

    @pytest.mark.parametrize(
        ("name", "value", "allowed"),
        [
            ("href", "https://example.com", True),
            ("class", "note", True),
            ("aria-label", "метка", True),
            ("data-id", "1", False),
            ("onclick", "steal()", False),
            ("ONMOUSEOVER", "x", False),
            ("href", "javascript:alert(1)", False),
            ("href", " JavaScript:alert(1)", False),
            ("href", "java\tscript:alert(1)", False),
            ("src", "data:text/html;base64,AAAA", False),
            ("href", "vbscript:msgbox", False),
        ],
    )
    def test_allows_attribute(self, name: str, value: str, allowed: bool) -> None:
        assert DEFAULT_ALLOWLIST.allows_attribute(name, value) is allowed


class TestBleachHtmlSanitizer:
    def _clean(self, html: str, config: AllowlistConfig = DEFAULT_ALLOWLIST) -> str:
        return BleachHtmlSanitizer().sanitize(html, config)

    def test_keeps_allowed_markup(self) -> None:
        result = self._clean("<p>Привет <b>мир</b></p>")
        assert "<p>" in result
        assert "<b>мир</b>" in result

    def test_removes_script_with_content(self) -> None:
        result = self._clean("<p>текст</p><script>alert(1)</script>")
        assert "<p>текст</p>" in result
        assert "script" not in result
        assert "alert" not in result

    def test_removes_iframe_with_content(self) -> None:
        result = self._clean('<iframe src="https://evil.example">внутри</iframe>снаружи')
        assert "iframe" not in result
        assert "внутри" not in result
        assert "снаружи" in result

    def test_strips_event_handlers(self) -> None:
        result = self._clean('<div onclick="steal()">x</div>')
        assert "onclick" not in result
        assert "<div>x</div>" in result

    def test_strips_javascript_links(self) -> None:
        result = self._clean('<a href="javascript:alert(1)">ссылка</a>')
        assert "javascript" not in result
        assert "ссылка" in result

    def test_keeps_safe_links(self) -> None:
        result = self._clean('<a href="https://example.com" title="Пример">x</a>')
        assert 'href="https://example.com"' in result
        assert 'title="Пример"' in result

    def test_keeps_aria_attributes(self) -> None:
        assert 'aria-label="метка"' in self._clean('<span aria-label="метка">x</span>')

    def test_drops_unlisted_attributes(self) -> None:
        assert "data-x" not in self._clean('<span data-x="1">x</span>')

    def test_drops_unlisted_tags_but_keeps_text(self) -> None:
        result = self._clean('<img src="x.png"><table><tr><td>ячейка</td></tr></table>')
        assert "<img" not in result
        assert "<table" not in result
        assert "ячейка" in result

    def test_strips_comments(self) -> None:
        assert "секрет" not in self._clean("<!-- секрет -->текст")

    def test_custom_allowlist(self) -> None:
        config = AllowlistConfig(allowed_tags=frozenset({"b"}))
        assert self._clean("<p><b>x</b></p>", config) == "<b>x</b>"

    def test_forbidden_tag_in_allowlist_is_still_removed(self) -> None:
        config = AllowlistConfig(allowed_tags=frozenset({"b", "script"}))
        result = self._clean("<script>alert(1)</script><b>y</b>", config)
        assert "script" not in result
        assert "<b>y</b>" in result

    def test_wraps_backend_errors(self) -> None:
        with patch.object(
            BleachHtmlSanitizer, "_build_cleaner", side_effect=RuntimeError("boom")
        ):
            with pytest.raises(SanitizationError, match="bleach sanitization failed: boom"):
                self._clean("<p>x</p>")


class TestStripTagsHtmlSanitizer:
    def test_removes_all_markup(self) -> None:
        result = StripTagsHtmlSanitizer().sanitize(
            "<p>Привет</p><script>alert(1)</script><b>мир</b>", DEFAULT_ALLOWLIST
        )
        assert result == "Приветмир"


class TestForbiddenElementFilter:
    def test_removes_elements_with_content(self) -> None:
        element_filter = ForbiddenElementFilter()
        result = element_filter.strip(
            "a<svg><script>x</script></svg>b<FORM action='/'>c</FORM>d",
            frozenset({"svg", "form"}),
        )
        assert result == "abd"

    def test_reuses_compiled_pattern_per_tag_set(self) -> None:
        element_filter = ForbiddenElementFilter()
        tags = frozenset({"script"})
        element_filter.strip("<script>x</script>", tags)
        element_filter.strip("<script>y</script>", tags)
        assert len(element_filter._patterns) == 1

    def test_empty_tag_set_is_noop(self) -> None:
        assert ForbiddenElementFilter().strip("<script>x</script>", frozenset()) == (
            "<script>x</script>"
        )


class TestSanitizeHtml:
    def test_uses_bleach_by_default(self) -> None:
        assert "<em>важно</em>" in sanitize_html("<em>важно</em><script>x</script>")

    @pytest.mark.parametrize("value", ["", None, 123])
    def test_empty_or_non_string_input(self, value: object) -> None:
        assert sanitize_html(value) == ""  # type: ignore[arg-type]

    def test_returns_placeholder_when_backend_fails(self, mock_logger: MagicMock) -> None:
        sanitizer = MagicMock(spec=BleachHtmlSanitizer)
        sanitizer.sanitize.side_effect = SanitizationError("parser crashed")

        result = sanitize_html("<p>x</p>", sanitizer=sanitizer, logger=mock_logger)

        assert result == SAFETY_PLACEHOLDER
        mock_logger.error.assert_called_once()

    def test_passes_custom_config_to_backend(self) -> None:
        sanitizer = MagicMock(spec=BleachHtmlSanitizer)
        sanitizer.sanitize.return_value = "ok"
        config = AllowlistConfig(allowed_tags=frozenset({"p"}))

        assert sanitize_html("<p>x</p>", config, sanitizer=sanitizer) == "ok"
        sanitizer.sanitize.assert_called_once_with("<p>x</p>", config)
