"""Translation lookup with parameter interpolation."""

import re
from typing import Any, Mapping, Optional

from pagelocale.i18n.catalog_store import CatalogStore
from pagelocale.i18n.models import LocaleState, TranslationCatalog, TranslationKey
from pagelocale.logging import get_module_logger

logger = get_module_logger()

_MISSING = object()


class Translator:
    """Resolves dotted key paths against the active catalog.

    Lookups never raise: a key that does not resolve is returned unchanged
    so the page shows the key instead of breaking.

    Attributes:
        store: Catalog store the active catalog is read from.
        state: Active locale state shared with the controller.
    """

    def __init__(self, store: CatalogStore, state: LocaleState):
        self.store = store
        self.state = state

    @property
    def catalog(self) -> Optional[TranslationCatalog]:
        """Catalog used for lookups.

        The catalog recorded on the state wins; before the first load
        completes the store's cache is consulted.
        """
        if self.state.catalog is not None:
            return self.state.catalog
        return self.store.get_cached(self.state.code)

    def t(self, key: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """Translate key in the active locale.

        Args:
            key: Dotted key path (e.g., "order.status.paid").
            params: Values substituted for {name} placeholders.

        Returns:
            The interpolated message; the raw value if the key resolves to
            a non-string (e.g., a nested mapping); key itself if it does
            not resolve.
        """
        value = self._lookup(key)
        if value is _MISSING:
            logger.warning("translation_not_found", key=key, locale=self.state.code)
            return key

        if params and isinstance(value, str):
            return self._interpolate(value, params)
        return value

    def has(self, key: str) -> bool:
        return self._lookup(key) is not _MISSING

    def _lookup(self, key: str) -> Any:
        catalog = self.catalog
        if catalog is None:
            return _MISSING
        try:
            parsed = TranslationKey.from_string(key)
        except ValueError:
            return _MISSING
        return catalog.lookup(parsed, _MISSING)

    @staticmethod
    def _interpolate(message: str, params: Mapping[str, Any]) -> str:
        """Replace {name} placeholders with the matching parameter values.

        All placeholders are matched in a single scan, so text produced by
        one substitution is never rescanned for further placeholders.
        Placeholders without a matching parameter are left as they are.
        """
        replacements = {f"{{{name}}}": str(value) for name, value in params.items()}
        pattern = re.compile("|".join(re.escape(token) for token in replacements))
        return pattern.sub(lambda match: replacements[match.group(0)], message)
