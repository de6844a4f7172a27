import re
from urllib.parse import urljoin, urlsplit, urlunsplit

DEFAULT_BASE_ORIGIN = "http://localhost"
SAFE_SCHEMES = frozenset({"http", "https", "mailto", "tel", "ftp"})

_UNSAFE_CHARS_RE = re.compile(r"[<>\"']")
_HIERARCHICAL_SCHEMES = frozenset({"http", "https", "ftp"})


def sanitize_uri(uri: str, base_origin: str = DEFAULT_BASE_ORIGIN) -> str:
    """Neutralize dangerous URI schemes.

    Relative references resolve against *base_origin*. A safe scheme returns
    the normalized absolute URI; any other scheme (javascript:, data:, ...)
    is dropped and only path, query and fragment remain. Unparseable input
    is returned without angle brackets and quotes.
    """
    if not isinstance(uri, str):
        return ""
    try:
        parts = urlsplit(urljoin(base_origin, uri.strip()))
    except ValueError:
        return _UNSAFE_CHARS_RE.sub("", uri)

    scheme = parts.scheme.lower()
    if scheme in SAFE_SCHEMES:
        path = parts.path
        if scheme in _HIERARCHICAL_SCHEMES and parts.netloc and not path:
            path = "/"
        return urlunsplit((scheme, parts.netloc, path, parts.query, parts.fragment))

    result = parts.path
    if parts.query:
        result += f"?{parts.query}"
    if parts.fragment:
        result += f"#{parts.fragment}"
    return result
