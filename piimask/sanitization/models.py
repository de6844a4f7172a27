from dataclasses import dataclass

SAFETY_PLACEHOLDER = "[Содержимое удалено из соображений безопасности]"

DEFAULT_ALLOWED_TAGS = frozenset(
    {
        "h1", "h2", "h3", "h4", "h5", "h6",
        "p", "span", "div",
        "b", "i", "u", "strong", "em", "mark", "small", "del", "ins",
        "ul", "ol", "li",
        "a", "br", "hr",
        "blockquote", "code", "pre",
    }
)

DEFAULT_ALLOWED_ATTRIBUTES = frozenset(
    {"href", "title", "target", "rel", "class", "id", "style", "role"}
)

DEFAULT_FORBIDDEN_TAGS = frozenset(
    {
        "script", "iframe", "object", "embed", "form", "input",
        "button", "style", "applet", "canvas", "math", "svg",
    }
)

DEFAULT_ALLOWED_PROTOCOLS = frozenset({"http", "https", "mailto", "tel", "ftp"})


@dataclass(frozen=True)
class AllowlistConfig:
    """Tags, attributes and URL schemes the HTML sanitizer keeps.

    Forbidden entries win over allowed ones.
    """

    allowed_tags: frozenset[str] = DEFAULT_ALLOWED_TAGS
    allowed_attributes: frozenset[str] = DEFAULT_ALLOWED_ATTRIBUTES
    allowed_attribute_prefixes: tuple[str, ...] = ("aria-",)
    forbidden_tags: frozenset[str] = DEFAULT_FORBIDDEN_TAGS
    forbidden_attribute_prefixes: tuple[str, ...] = ("on",)
    forbidden_value_schemes: tuple[str, ...] = ("javascript:", "data:", "vbscript:")
    allowed_protocols: frozenset[str] = DEFAULT_ALLOWED_PROTOCOLS

    @property
    def effective_tags(self) -> frozenset[str]:
        return self.allowed_tags - self.forbidden_tags

    def allows_attribute(self, name: str, value: str | None) -> bool:
        name = name.lower()
        if name.startswith(self.forbidden_attribute_prefixes):
            return False
        if value and _normalize_value(value).startswith(self.forbidden_value_schemes):
            return False
        if name in self.allowed_attributes:
            return True
        return name.startswith(self.allowed_attribute_prefixes)


DEFAULT_ALLOWLIST = AllowlistConfig()


def _normalize_value(value: str) -> str:
    # "java\tscript:" and " javascript:" compare equal to "javascript:".
    return "".join(ch for ch in value if ch.isprintable() and not ch.isspace()).lower()
