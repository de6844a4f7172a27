"""Destructive plain-text sanitizers."""

import html
import re

_TAG_RE = re.compile(r"<[^>]*>")
_LOOSE_TAG_RE = re.compile(r"<[^>]*>?")
_EXECUTABLE_BLOCK_RE = re.compile(
    r"<(script|style)\b[^>]*>.*?</\1\s*>", re.IGNORECASE | re.DOTALL
)
# Only tag-shaped text counts after decoding, so "5 < 6 and 7 > 3" survives.
_DECODED_TAG_RE = re.compile(r"</?[A-Za-z!][^>]*>")

_ENTITIES: tuple[tuple[str, str], ...] = (
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&amp;", "&"),
    ("&quot;", '"'),
    ("&#39;", "'"),
)


def sanitize_input(value: object) -> str:
    """Strip all markup from user input and restore entity-encoded characters.

    Non-string input (including None) becomes an empty string. Script and
    style elements are removed together with their content; every other tag
    is removed and its inner text kept. Tags re-created by entity decoding
    are removed as well, so the result never contains a tag.
    """
    if not isinstance(value, str):
        return ""

    stripped = _TAG_RE.sub("", _EXECUTABLE_BLOCK_RE.sub("", value))
    decoded = _decode_entities(stripped)
    while True:
        cleaned = _DECODED_TAG_RE.sub("", _EXECUTABLE_BLOCK_RE.sub("", decoded))
        if cleaned == decoded:
            return cleaned
        decoded = cleaned


sanitize_text = sanitize_input


def escape_text(value: object) -> str:
    """Strip tags, then HTML-escape what remains for rendering as plain text."""
    if not isinstance(value, str):
        return ""
    return html.escape(_LOOSE_TAG_RE.sub("", value), quote=True)


def _decode_entities(text: str) -> str:
    for entity, char in _ENTITIES:
        text = text.replace(entity, char)
    return text
