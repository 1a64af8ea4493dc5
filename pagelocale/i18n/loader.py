"""Catalog source interface and implementations.

A catalog source fetches the raw message tree for one locale code. Sources
raise CatalogLoadError for every failure (transport, status, parse) so the
catalog store has a single error to recover from.
"""

import asyncio
import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional

import httpx
import yaml

from pagelocale.i18n.exceptions import CatalogLoadError
from pagelocale.logging import get_module_logger

logger = get_module_logger()


class CatalogSource(ABC):
    """Abstract base for catalog sources."""

    @abstractmethod
    async def fetch(self, code: str) -> Dict[str, Any]:
        """Fetch the message tree for a locale.

        Args:
            code: Locale code to fetch.

        Returns:
            Mapping of names to strings or nested mappings.

        Raises:
            CatalogLoadError: If the catalog is missing, unreachable or invalid.
        """

    @abstractmethod
    def location(self, code: str) -> str:
        """Describe where the catalog for code lives (URL or path)."""

    @staticmethod
    def _ensure_mapping(code: str, data: Any) -> Dict[str, Any]:
        if not isinstance(data, dict):
            raise CatalogLoadError(
                code, f"expected a JSON object, got {type(data).__name__}"
            )
        return data


class HttpCatalogSource(CatalogSource):
    """Fetches <base_url>/<code>.json over HTTP.

    No timeout is applied unless one is configured: a fetch that never
    answers keeps the caller waiting.

    Attributes:
        base_url: URL prefix catalogs live under.
    """

    def __init__(
        self,
        base_url: str,
        client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
    ):
        """Initialize the HTTP source.

        Args:
            base_url: URL prefix catalogs live under.
            client: Pre-configured client. One is created when omitted and
                closed by aclose().
            timeout: Timeout in seconds for a created client (None disables it).
        """
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=timeout,
            headers={"Accept": "application/json"},
        )
        self._logger = logger.bind(base_url=self.base_url)

    def location(self, code: str) -> str:
        return f"{self.base_url}/{code}.json"

    async def fetch(self, code: str) -> Dict[str, Any]:
        url = self.location(code)
        try:
            response = await self._client.get(url)
        except httpx.HTTPError as e:
            raise CatalogLoadError(code, f"request to {url} failed: {e}") from e

        if not response.is_success:
            raise CatalogLoadError(code, f"{url} returned HTTP {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            raise CatalogLoadError(code, f"{url} is not valid JSON: {e}") from e

        self._logger.debug("fetched_catalog", locale=code, url=url)
        return self._ensure_mapping(code, data)

    async def aclose(self) -> None:
        """Close the underlying client if this source created it."""
        if self._owns_client:
            await self._client.aclose()


class FileCatalogSource(CatalogSource):
    """Reads catalogs from a local directory.

    Looks for <code>.json first, then <code>.yml and <code>.yaml.

    Attributes:
        catalog_dir: Directory containing catalog files.
    """

    SUFFIXES = (".json", ".yml", ".yaml")

    def __init__(self, catalog_dir: Path):
        """Initialize the file source.

        Args:
            catalog_dir: Directory containing catalog files.

        Raises:
            ValueError: If catalog_dir does not exist.
        """
        self.catalog_dir = Path(catalog_dir)
        if not self.catalog_dir.is_dir():
            raise ValueError(f"Catalog directory not found: {self.catalog_dir}")

        logger.info("initialized_file_catalog_source", catalog_dir=str(self.catalog_dir))

    def _find(self, code: str) -> Optional[Path]:
        for suffix in self.SUFFIXES:
            path = self.catalog_dir / f"{code}{suffix}"
            if path.is_file():
                return path
        return None

    def location(self, code: str) -> str:
        path = self._find(code)
        return str(path or self.catalog_dir / f"{code}.json")

    async def fetch(self, code: str) -> Dict[str, Any]:
        return await asyncio.to_thread(self._read, code)

    def _read(self, code: str) -> Dict[str, Any]:
        path = self._find(code)
        if path is None:
            raise CatalogLoadError(code, f"no catalog file in {self.catalog_dir}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.suffix == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise CatalogLoadError(code, f"failed to parse {path}: {e}") from e

        return self._ensure_mapping(code, data)
