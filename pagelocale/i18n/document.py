"""Declarative translation of a document tree.

Elements opt in through marker attributes whose value is a key path:

    <h1 data-i18n="home.title"></h1>
    <input data-i18n-placeholder="form.email">
    <button data-i18n-title="actions.save.hint"></button>
    <meta data-i18n-document-title="home.page_title">

The binder talks to the host only through the DocumentTree protocol, so
any tree (a browser bridge, a parsed HTML document, an in-memory fake)
can be translated.
"""

from typing import Any, List, Optional, Protocol, Sequence, runtime_checkable

from pagelocale.i18n.models import (
    Direction,
    LocaleState,
    MarkerKind,
    TranslationMarker,
)
from pagelocale.i18n.registry import LocaleRegistry
from pagelocale.i18n.translator import Translator
from pagelocale.logging import get_module_logger

logger = get_module_logger()

MARKER_ATTRIBUTES = {
    MarkerKind.TEXT: "data-i18n",
    MarkerKind.PLACEHOLDER: "data-i18n-placeholder",
    MarkerKind.TITLE: "data-i18n-title",
    MarkerKind.DOCUMENT_TITLE: "data-i18n-document-title",
}

# Element attribute written for each attribute-targeting marker kind
TARGET_ATTRIBUTES = {
    MarkerKind.PLACEHOLDER: "placeholder",
    MarkerKind.TITLE: "title",
}

RTL_CLASS = "rtl"


@runtime_checkable
class DocumentTree(Protocol):
    """Capabilities the binder needs from a host document."""

    def query_all_by_marker(self, marker_name: str) -> Sequence[Any]:
        """Return handles of every element carrying attribute marker_name."""
        ...

    def get_attribute(self, element: Any, name: str) -> Optional[str]: ...

    def set_text(self, element: Any, value: str) -> None: ...

    def set_attribute(self, element: Any, name: str, value: str) -> None: ...

    def set_title(self, value: str) -> None:
        """Set the document-level title."""
        ...

    def set_document_attribute(self, name: str, value: str) -> None:
        """Set an attribute on the document root element."""
        ...

    def set_root_class(self, name: str, enabled: bool) -> None:
        """Add (enabled) or remove a presentation class on the root element."""
        ...


class DocumentBinder:
    """Applies translations and text direction to a document.

    Attributes:
        document: Host document tree.
        translator: Resolves marker key paths.
        registry: Supplies the active locale's direction.
        state: Active locale state.
    """

    def __init__(
        self,
        document: DocumentTree,
        translator: Translator,
        registry: LocaleRegistry,
        state: LocaleState,
    ):
        self.document = document
        self.translator = translator
        self.registry = registry
        self.state = state

    def scan(self) -> List[TranslationMarker]:
        """Collect the markers present in the document.

        Markers are returned grouped by kind in the order text, placeholder,
        title, document title. Markers with an empty key are skipped.
        """
        markers = []
        for kind, attribute in MARKER_ATTRIBUTES.items():
            for element in self.document.query_all_by_marker(attribute):
                key = self.document.get_attribute(element, attribute)
                if key:
                    markers.append(TranslationMarker(kind, key, element))
        return markers

    def translate_page(self) -> None:
        """Write translations for every marker in the document.

        The document title is only set when exactly one element carries the
        document-title marker.
        """
        markers = self.scan()
        title_markers = [m for m in markers if m.kind == MarkerKind.DOCUMENT_TITLE]
        # Elements with an empty marker value still count towards "exactly one"
        title_elements = self.document.query_all_by_marker(
            MARKER_ATTRIBUTES[MarkerKind.DOCUMENT_TITLE]
        )

        for marker in markers:
            if marker.kind == MarkerKind.DOCUMENT_TITLE:
                continue
            value = self._translate(marker.key_path)
            if marker.kind == MarkerKind.TEXT:
                self.document.set_text(marker.element, value)
            else:
                self.document.set_attribute(
                    marker.element, TARGET_ATTRIBUTES[marker.kind], value
                )

        if len(title_elements) == 1 and title_markers:
            self.document.set_title(self._translate(title_markers[0].key_path))
        elif len(title_elements) > 1:
            logger.warning(
                "ambiguous_document_title_markers",
                count=len(title_elements),
                keys=[m.key_path for m in title_markers],
            )

        logger.debug("translated_page", locale=self.state.code, marker_count=len(markers))

    def apply_direction(self) -> None:
        """Expose the active locale's direction and code on the document root."""
        descriptor = self.registry.get(self.state.code)
        direction = descriptor.direction if descriptor else Direction.LTR

        self.document.set_document_attribute("dir", direction.value)
        self.document.set_document_attribute("lang", self.state.code)
        self.document.set_root_class(RTL_CLASS, direction == Direction.RTL)

    def _translate(self, key: str) -> str:
        value = self.translator.t(key)
        return value if isinstance(value, str) else str(value)
