"""Locale lifecycle: initial resolution and runtime switching.

Within a single init() or set_locale() call the catalog load completes
before the direction is applied, which happens before the translation
pass. Overlapping set_locale() calls are not serialized: the state keeps
whichever code was written last.
"""

from typing import Any, Callable, List, Mapping, Optional

from pagelocale.events import Event, EventDispatcher
from pagelocale.i18n.catalog_store import CatalogStore
from pagelocale.i18n.document import DocumentBinder, DocumentTree
from pagelocale.i18n.host import HostContext
from pagelocale.i18n.models import LocaleDescriptor, LocaleState
from pagelocale.i18n.registry import LocaleRegistry
from pagelocale.i18n.resolvers import LocaleCandidates, LocaleResolver
from pagelocale.i18n.storage import KeyValueStore
from pagelocale.i18n.translator import Translator
from pagelocale.logging import get_module_logger

logger = get_module_logger()

LOCALE_CHANGED = "locale.changed"
DEFAULT_STORAGE_KEY = "ezpay_locale"


class LocaleController:
    """Owns the active locale state and coordinates the i18n components.

    Attributes:
        registry: Supported locales.
        store: Catalog store.
        storage: Persistence for the chosen locale.
        host: Request and environment signals.
        state: Active locale state, shared with translator and binder.
        translator: Key lookup against the active catalog.
        binder: Document translation and direction.
        events: Dispatcher for locale change notifications.
        storage_key: Key the chosen locale is persisted under.
    """

    def __init__(
        self,
        registry: LocaleRegistry,
        store: CatalogStore,
        storage: KeyValueStore,
        document: DocumentTree,
        host: Optional[HostContext] = None,
        events: Optional[EventDispatcher] = None,
        storage_key: str = DEFAULT_STORAGE_KEY,
    ):
        self.registry = registry
        self.store = store
        self.storage = storage
        self.host = host or HostContext()
        self.events = events or EventDispatcher()
        self.storage_key = storage_key

        self.state = LocaleState(code=registry.default_code)
        self.resolver = LocaleResolver(registry)
        self.translator = Translator(store, self.state)
        self.binder = DocumentBinder(document, self.translator, registry, self.state)
        self.is_ready = False

    @property
    def locale(self) -> str:
        return self.state.code

    async def init(self, default_code: Optional[str] = None) -> "LocaleController":
        """Resolve the starting locale, load it and translate the document.

        Precedence: URL query parameter, persisted choice, environment
        language, default_code (registry default when omitted).

        Args:
            default_code: Caller default locale.

        Returns:
            self, ready for use.
        """
        fallback = default_code or self.registry.default_code
        candidates = LocaleCandidates(
            requested=self.host.query_locale(),
            persisted=self.storage.get(self.storage_key),
            environment=self.host.environment_tag(),
            default=fallback,
        )
        code = self.resolver.resolve(candidates, fallback)

        if not self.registry.has(code):
            logger.warning(
                "resolved_unsupported_locale",
                locale=code,
                default_locale=self.registry.default_code,
            )
            code = self.registry.default_code

        self.state.code = code
        await self._activate(code)
        self.is_ready = True

        logger.info("i18n_initialized", locale=code)
        return self

    async def set_locale(self, code: str) -> bool:
        """Switch to another supported locale.

        Unsupported codes are ignored: state is untouched and no
        notification is sent.

        Args:
            code: Locale code to activate.

        Returns:
            True if the switch happened, False if code is unsupported.
        """
        if not self.registry.has(code):
            logger.warning("unsupported_locale", locale=code)
            return False

        self.state.code = code
        self.storage.set(self.storage_key, code)

        await self._activate(code)

        self.events.dispatch(Event(event_type=LOCALE_CHANGED, metadata={"locale": code}))
        logger.info("locale_changed", locale=code)
        return True

    async def _activate(self, code: str) -> None:
        catalog = await self.store.load(code)
        # A later switch may have moved the state on while this load was pending
        if self.state.code == code:
            self.state.catalog = catalog
        self.binder.apply_direction()
        self.binder.translate_page()

    def on_locale_changed(self, handler: Callable[[Event], Any]) -> Callable[[Event], Any]:
        """Register an observer for locale changes; usable as a decorator."""
        return self.events.register(LOCALE_CHANGED)(handler)

    def t(self, key: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        return self.translator.t(key, params)

    def current_locale(self) -> LocaleDescriptor:
        """Descriptor of the active locale."""
        return self.registry.get(self.state.code) or self.registry.default

    def supported_locales(self) -> List[LocaleDescriptor]:
        """All supported locales in registration order."""
        return self.registry.all()
