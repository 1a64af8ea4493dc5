"""Factory functions for creating i18n components.

Builds a LocaleController with default components from settings.
"""

from pathlib import Path
from typing import Optional

import httpx

from pagelocale.configuration import I18nSettings, settings
from pagelocale.events import EventDispatcher
from pagelocale.i18n.catalog_store import CatalogStore
from pagelocale.i18n.controller import LocaleController
from pagelocale.i18n.document import DocumentTree
from pagelocale.i18n.host import HostContext
from pagelocale.i18n.loader import CatalogSource, FileCatalogSource, HttpCatalogSource
from pagelocale.i18n.registry import LocaleRegistry
from pagelocale.i18n.storage import KeyValueStore, MemoryKeyValueStore
from pagelocale.logging import get_module_logger

logger = get_module_logger()


def create_catalog_source(
    config: Optional[I18nSettings] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> CatalogSource:
    """Create the catalog source described by config.

    A configured catalog directory wins over the HTTP base URL.

    Args:
        config: i18n settings (default: settings.i18n).
        client: Optional HTTP client for the HTTP source.

    Returns:
        FileCatalogSource or HttpCatalogSource.
    """
    config = config or settings.i18n
    if config.catalog_dir:
        return FileCatalogSource(Path(config.catalog_dir))
    return HttpCatalogSource(
        config.catalog_base_url,
        client=client,
        timeout=config.fetch_timeout,
    )


def create_controller(
    document: DocumentTree,
    url: Optional[str] = None,
    environment_language: Optional[str] = None,
    storage: Optional[KeyValueStore] = None,
    registry: Optional[LocaleRegistry] = None,
    source: Optional[CatalogSource] = None,
    events: Optional[EventDispatcher] = None,
    config: Optional[I18nSettings] = None,
) -> LocaleController:
    """Create and wire a LocaleController.

    The controller still needs ``await controller.init()`` before use.

    Args:
        document: Host document to translate.
        url: Current page URL (its query may carry ?lang=...).
        environment_language: Host language tag. Detected from the process
            environment when omitted.
        storage: Persistence for the chosen locale (default: in memory).
        registry: Supported locales (default: built-in table with the
            configured default locale).
        source: Catalog source (default: from settings).
        events: Dispatcher for change notifications.
        config: i18n settings (default: settings.i18n).

    Returns:
        LocaleController: Configured, not yet initialized controller.

    Usage:
        controller = create_controller(document, url=request_url)
        await controller.init()
        controller.t("home.title")
    """
    config = config or settings.i18n
    registry = registry or LocaleRegistry(default_code=config.default_locale)
    source = source or create_catalog_source(config)

    host = HostContext(url=url, query_param=config.query_param)
    if environment_language is not None:
        host.environment_language = environment_language

    controller = LocaleController(
        registry=registry,
        store=CatalogStore(source, registry.default_code),
        storage=storage or MemoryKeyValueStore(),
        document=document,
        host=host,
        events=events,
        storage_key=config.storage_key,
    )
    logger.info(
        "controller_created",
        default_locale=registry.default_code,
        source=type(source).__name__,
    )
    return controller
