"""Translation models for the i18n system.

Defines the core data structures for locales, catalogs and the active
locale state.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple


class Direction(str, Enum):
    """Text layout direction."""

    LTR = "ltr"
    RTL = "rtl"


@dataclass(frozen=True)
class LocaleDescriptor:
    """A supported locale.

    Attributes:
        code: BCP 47 style tag (e.g., "en", "zh-TW").
        display_name: Name of the language in that language.
        direction: Text direction used when the locale is active.
    """

    code: str
    display_name: str
    direction: Direction = Direction.LTR

    @property
    def language(self) -> str:
        """Primary subtag (e.g., "zh" from "zh-TW")."""
        return primary_subtag(self.code)

    @property
    def is_rtl(self) -> bool:
        return self.direction == Direction.RTL


def primary_subtag(tag: str) -> str:
    """Return the portion of a language tag before the first hyphen."""
    return tag.split("-", 1)[0]


@dataclass(frozen=True)
class TranslationKey:
    """A dotted key path selecting a message in a catalog.

    Frozen to ensure immutability and hashability.

    Attributes:
        segments: Path components (e.g., ("order", "status", "paid")).
    """

    segments: Tuple[str, ...]

    def __str__(self) -> str:
        """Return full dot-separated key path."""
        return ".".join(self.segments)

    @classmethod
    def from_string(cls, key_string: str) -> "TranslationKey":
        """Create TranslationKey from dot-separated string.

        Args:
            key_string: Dot-separated key (e.g., "order.status.paid").

        Returns:
            TranslationKey instance.

        Raises:
            ValueError: If key_string is empty or has an empty segment.
        """
        segments = tuple(key_string.split("."))
        if not all(segments):
            raise ValueError(f"Translation key has an empty segment: {key_string!r}")
        return cls(segments=segments)


_MISSING = object()


@dataclass
class TranslationCatalog:
    """Messages for a single locale.

    Attributes:
        locale: Locale code this catalog belongs to.
        messages: Nested mapping of names to strings or further mappings.
        loaded_at: Timestamp (ISO 8601) when the catalog was loaded.
        source: Where the catalog came from (URL or file path).
    """

    locale: str
    messages: Dict[str, Any] = field(default_factory=dict)
    loaded_at: Optional[str] = None
    source: Optional[str] = None

    def lookup(self, key: TranslationKey, default: Any = None) -> Any:
        """Descend the message tree along key.

        Every intermediate level must be a mapping; if any level is absent
        or is a terminal value the lookup fails.

        Args:
            key: Path to resolve.
            default: Value returned when the path does not resolve.

        Returns:
            The value found at the path (string or nested mapping), or default.
        """
        value: Any = self.messages
        for segment in key.segments:
            if not isinstance(value, Mapping):
                return default
            value = value.get(segment, _MISSING)
            if value is _MISSING:
                return default
        return value

    def has_message(self, key: TranslationKey) -> bool:
        return self.lookup(key, _MISSING) is not _MISSING

    @property
    def is_empty(self) -> bool:
        return not self.messages


@dataclass
class LocaleState:
    """Active locale for one controller.

    Holds the active code and the catalog returned by the most recent
    completed load for it. The catalog may belong to the default locale
    when the active locale's own catalog failed to load.

    Attributes:
        code: Active locale code. Always a registered code.
        catalog: Catalog used for lookups, None until the first load completes.
    """

    code: str
    catalog: Optional[TranslationCatalog] = None


class MarkerKind(str, Enum):
    """Document targets a marker attribute can populate."""

    TEXT = "text"
    PLACEHOLDER = "placeholder"
    TITLE = "title"
    DOCUMENT_TITLE = "document_title"


@dataclass(frozen=True)
class TranslationMarker:
    """A marker discovered while scanning a document.

    Attributes:
        kind: Which target the marker populates.
        key_path: Dotted key path taken from the marker attribute.
        element: Host element handle carrying the marker.
    """

    kind: MarkerKind
    key_path: str
    element: Any = field(compare=False, default=None)
