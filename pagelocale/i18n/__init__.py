"""i18n system - locale resolution, catalogs and document translation.

Main components:
- registry: LocaleRegistry, the table of supported locales
- resolvers: LocaleResolver and LanguageNegotiator for locale detection
- loader: CatalogSource, HttpCatalogSource and FileCatalogSource
- catalog_store: CatalogStore with caching and default-locale fallback
- translator: Translator with key-path lookup and {param} interpolation
- document: DocumentBinder for marker-attribute translation
- controller: LocaleController orchestrating init and locale switching
"""

from pagelocale.i18n.catalog_store import CatalogStore
from pagelocale.i18n.controller import LOCALE_CHANGED, LocaleController
from pagelocale.i18n.document import MARKER_ATTRIBUTES, DocumentBinder, DocumentTree
from pagelocale.i18n.exceptions import CatalogLoadError, I18nError
from pagelocale.i18n.factory import create_catalog_source, create_controller
from pagelocale.i18n.host import HostContext
from pagelocale.i18n.loader import CatalogSource, FileCatalogSource, HttpCatalogSource
from pagelocale.i18n.models import (
    Direction,
    LocaleDescriptor,
    LocaleState,
    MarkerKind,
    TranslationCatalog,
    TranslationKey,
    TranslationMarker,
)
from pagelocale.i18n.registry import DEFAULT_LOCALES, LocaleRegistry
from pagelocale.i18n.resolvers import (
    LanguageNegotiator,
    LocaleCandidates,
    LocaleResolver,
    detect_environment_language,
    normalize_tag,
)
from pagelocale.i18n.storage import (
    JsonFileKeyValueStore,
    KeyValueStore,
    MemoryKeyValueStore,
)
from pagelocale.i18n.translator import Translator

__all__ = [
    "CatalogLoadError",
    "CatalogSource",
    "CatalogStore",
    "DEFAULT_LOCALES",
    "Direction",
    "DocumentBinder",
    "DocumentTree",
    "FileCatalogSource",
    "HostContext",
    "HttpCatalogSource",
    "I18nError",
    "JsonFileKeyValueStore",
    "KeyValueStore",
    "LOCALE_CHANGED",
    "LanguageNegotiator",
    "LocaleCandidates",
    "LocaleController",
    "LocaleDescriptor",
    "LocaleRegistry",
    "LocaleResolver",
    "LocaleState",
    "MARKER_ATTRIBUTES",
    "MarkerKind",
    "MemoryKeyValueStore",
    "TranslationCatalog",
    "TranslationKey",
    "TranslationMarker",
    "Translator",
    "create_catalog_source",
    "create_controller",
    "detect_environment_language",
    "normalize_tag",
]
