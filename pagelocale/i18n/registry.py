"""Table of supported locales."""

from typing import Iterable, Iterator, List, Optional

from pagelocale.i18n.models import Direction, LocaleDescriptor

DEFAULT_LOCALES = (
    LocaleDescriptor("en", "English", Direction.LTR),
    LocaleDescriptor("zh-CN", "简体中文", Direction.LTR),
    LocaleDescriptor("zh-TW", "繁體中文", Direction.LTR),
    LocaleDescriptor("ru", "Русский", Direction.LTR),
    LocaleDescriptor("fa", "فارسی", Direction.RTL),
    LocaleDescriptor("vi", "Tiếng Việt", Direction.LTR),
    LocaleDescriptor("my", "မြန်မာ", Direction.LTR),
)

DEFAULT_LOCALE_CODE = "zh-CN"
SIMPLIFIED_CHINESE_CODE = "zh-CN"
TRADITIONAL_CHINESE_CODE = "zh-TW"


class LocaleRegistry:
    """Ordered, immutable mapping of locale code to LocaleDescriptor.

    Iteration order is registration order.

    Attributes:
        default_code: Locale used when nothing else resolves.
        simplified_chinese_code: Target for Simplified Chinese tags.
        traditional_chinese_code: Target for Traditional Chinese tags.
    """

    def __init__(
        self,
        locales: Iterable[LocaleDescriptor] = DEFAULT_LOCALES,
        default_code: str = DEFAULT_LOCALE_CODE,
        simplified_chinese_code: str = SIMPLIFIED_CHINESE_CODE,
        traditional_chinese_code: str = TRADITIONAL_CHINESE_CODE,
    ):
        """Initialize the registry.

        Args:
            locales: Descriptors in registration order.
            default_code: Designated default locale code.
            simplified_chinese_code: Code chosen for Simplified Chinese tags.
            traditional_chinese_code: Code chosen for Traditional Chinese tags.

        Raises:
            ValueError: If a code is registered twice or default_code is not
                registered.
        """
        self._locales = {}
        for descriptor in locales:
            if descriptor.code in self._locales:
                raise ValueError(f"Duplicate locale code: {descriptor.code}")
            self._locales[descriptor.code] = descriptor

        if default_code not in self._locales:
            raise ValueError(f"Default locale is not registered: {default_code}")

        self.default_code = default_code
        self.simplified_chinese_code = simplified_chinese_code
        self.traditional_chinese_code = traditional_chinese_code

    def has(self, code: Optional[str]) -> bool:
        return code is not None and code in self._locales

    def get(self, code: Optional[str]) -> Optional[LocaleDescriptor]:
        if code is None:
            return None
        return self._locales.get(code)

    def all(self) -> List[LocaleDescriptor]:
        return list(self._locales.values())

    def codes(self) -> List[str]:
        return list(self._locales.keys())

    @property
    def default(self) -> LocaleDescriptor:
        return self._locales[self.default_code]

    def __contains__(self, code: object) -> bool:
        return code in self._locales

    def __iter__(self) -> Iterator[LocaleDescriptor]:
        return iter(self._locales.values())

    def __len__(self) -> int:
        return len(self._locales)
