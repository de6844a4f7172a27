import re


class ForbiddenElementFilter:
    """Removes forbidden elements together with their content.

    Compiled patterns are cached per tag set for the lifetime of the filter.
    """

    def __init__(self) -> None:
        self._patterns: dict[frozenset[str], re.Pattern[str]] = {}

    def strip(self, html: str, tags: frozenset[str]) -> str:
        if not tags:
            return html
        return self._pattern_for(tags).sub("", html)

    def _pattern_for(self, tags: frozenset[str]) -> re.Pattern[str]:
        pattern = self._patterns.get(tags)
        if pattern is None:
            names = "|".join(re.escape(tag) for tag in sorted(tags))
            pattern = re.compile(
                rf"<({names})\b[^>]*>.*?</\1\s*>", re.IGNORECASE | re.DOTALL
            )
            self._patterns[tags] = pattern
        return pattern
