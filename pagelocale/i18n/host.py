"""Host environment signals consulted during locale resolution."""

from dataclasses import dataclass, field
from typing import Optional
from urllib.parse import parse_qs, urlsplit

from pagelocale.i18n.resolvers import detect_environment_language, normalize_tag


@dataclass
class HostContext:
    """What the host knows about the current request and environment.

    Attributes:
        url: URL of the current page/request; its query may carry a locale
            override.
        environment_language: Language tag reported by the host (e.g. the
            browser's navigator.language or the process locale).
        query_param: Name of the locale override query parameter.
    """

    url: Optional[str] = None
    environment_language: Optional[str] = field(default_factory=detect_environment_language)
    query_param: str = "lang"

    def query_locale(self) -> Optional[str]:
        """Return the first non-empty value of the override query parameter."""
        if not self.url:
            return None
        values = parse_qs(urlsplit(self.url).query).get(self.query_param, [])
        for value in values:
            if value:
                return value
        return None

    def environment_tag(self) -> Optional[str]:
        return normalize_tag(self.environment_language)
