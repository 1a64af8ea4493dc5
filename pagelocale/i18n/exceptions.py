"""Exceptions raised inside the i18n layer.

None of these escape the public API: catalog failures are absorbed by the
catalog store's fallback chain.
"""


class I18nError(Exception):
    """Base class for i18n errors."""


class CatalogLoadError(I18nError):
    """A catalog could not be fetched or parsed.

    Attributes:
        code: Locale code whose catalog failed to load.
        reason: Human readable cause.
    """

    def __init__(self, code: str, reason: str):
        self.code = code
        self.reason = reason
        super().__init__(f"Failed to load catalog for {code}: {reason}")
