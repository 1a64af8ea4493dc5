"""Cached, fault-tolerant access to message catalogs.

load() never raises: a locale whose catalog fails to load is served the
default locale's catalog instead, and a failing default yields an empty
catalog. Only successful loads are cached, and they are never evicted.
"""

import asyncio
from datetime import datetime, timezone
from typing import Dict, List, Optional

from pagelocale.i18n.exceptions import CatalogLoadError
from pagelocale.i18n.loader import CatalogSource
from pagelocale.i18n.models import TranslationCatalog
from pagelocale.logging import get_module_logger

logger = get_module_logger()


class CatalogStore:
    """Loads catalogs from a source and memoizes them per locale code.

    Concurrent loads of the same code share one in-flight fetch.

    Attributes:
        source: Where catalogs are fetched from.
        default_code: Locale whose catalog stands in for failed loads.
        cache: Successfully loaded catalogs by locale code.
    """

    def __init__(self, source: CatalogSource, default_code: str):
        self.source = source
        self.default_code = default_code
        self.cache: Dict[str, TranslationCatalog] = {}
        self._pending: Dict[str, "asyncio.Task[TranslationCatalog]"] = {}

    async def load(self, code: str) -> TranslationCatalog:
        """Return the catalog for code, fetching it on first use.

        Args:
            code: Locale code to load.

        Returns:
            The cached or freshly fetched catalog; the default locale's
            catalog if this one failed; an empty catalog if the default
            itself failed.
        """
        catalog = self.cache.get(code)
        if catalog is not None:
            logger.debug("loaded_from_cache", locale=code)
            return catalog

        try:
            return await self._fetch_shared(code)
        except CatalogLoadError as e:
            logger.error("catalog_load_failed", locale=code, error=e.reason)

        if code != self.default_code:
            logger.warning(
                "falling_back_to_default_catalog",
                locale=code,
                default_locale=self.default_code,
            )
            return await self.load(self.default_code)

        return TranslationCatalog(locale=code)

    def is_cached(self, code: str) -> bool:
        return code in self.cache

    def get_cached(self, code: str) -> Optional[TranslationCatalog]:
        return self.cache.get(code)

    def cached_codes(self) -> List[str]:
        return list(self.cache.keys())

    async def _fetch_shared(self, code: str) -> TranslationCatalog:
        task = self._pending.get(code)
        if task is None:
            task = asyncio.ensure_future(self._fetch(code))
            self._pending[code] = task
        else:
            logger.debug("joined_pending_catalog_load", locale=code)
        # A cancelled caller must not cancel the fetch other callers wait on
        return await asyncio.shield(task)

    async def _fetch(self, code: str) -> TranslationCatalog:
        try:
            try:
                messages = await self.source.fetch(code)
            except CatalogLoadError:
                raise
            except Exception as e:
                logger.exception("catalog_source_error", locale=code)
                raise CatalogLoadError(code, str(e)) from e

            catalog = TranslationCatalog(
                locale=code,
                messages=messages,
                loaded_at=datetime.now(timezone.utc).isoformat(),
                source=self.source.location(code),
            )
            self.cache[code] = catalog
            logger.info(
                "catalog_loaded",
                locale=code,
                source=catalog.source,
                namespace_count=len(messages),
            )
            return catalog
        finally:
            self._pending.pop(code, None)
