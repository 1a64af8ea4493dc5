"""Locale resolution and catalog loading settings."""

from typing import Optional

from pydantic import Field, field_validator

from pagelocale.configuration.base import ComponentSettings


class I18nSettings(ComponentSettings):
    """Configuration for the i18n layer.

    Environment Variables:
        I18N_DEFAULT_LOCALE: Locale used when nothing else resolves (default: zh-CN)
        I18N_CATALOG_BASE_URL: Base URL catalogs are fetched from
            (default: http://127.0.0.1:8000/static/locales,
            catalog URL is <base>/<code>.json)
        I18N_CATALOG_DIR: Directory of local catalog files. When set, catalogs
            are read from disk instead of over HTTP.
        I18N_STORAGE_KEY: Key the chosen locale is persisted under
            (default: ezpay_locale)
        I18N_QUERY_PARAM: URL query parameter carrying a locale override
            (default: lang)
        I18N_FETCH_TIMEOUT: Seconds before a catalog fetch gives up.
            Unset means no timeout.

    Example:
        ```python
        from pagelocale.configuration import settings

        base_url = settings.i18n.catalog_base_url
        storage_key = settings.i18n.storage_key
        ```
    """

    default_locale: str = Field(default="zh-CN", alias="I18N_DEFAULT_LOCALE")
    catalog_base_url: str = Field(
        default="http://127.0.0.1:8000/static/locales",
        alias="I18N_CATALOG_BASE_URL",
        description="Base URL for catalog resources",
    )
    catalog_dir: Optional[str] = Field(
        default=None,
        alias="I18N_CATALOG_DIR",
        description="Local directory of catalog files (overrides HTTP)",
    )
    storage_key: str = Field(default="ezpay_locale", alias="I18N_STORAGE_KEY")
    query_param: str = Field(default="lang", alias="I18N_QUERY_PARAM")
    fetch_timeout: Optional[float] = Field(
        default=None,
        alias="I18N_FETCH_TIMEOUT",
        description="Catalog fetch timeout in seconds (None disables it)",
    )

    @field_validator("catalog_base_url", mode="after")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize the base URL so catalog paths join cleanly."""
        return v.rstrip("/")
