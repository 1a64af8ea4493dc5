"""Tests for pagelocale configuration settings."""

import pytest

from pagelocale.configuration import I18nSettings, Settings

pytestmark = pytest.mark.unit

I18N_VARIABLES = (
    "I18N_DEFAULT_LOCALE",
    "I18N_CATALOG_BASE_URL",
    "I18N_CATALOG_DIR",
    "I18N_STORAGE_KEY",
    "I18N_QUERY_PARAM",
    "I18N_FETCH_TIMEOUT",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in I18N_VARIABLES + ("PREFIX",):
        monkeypatch.delenv(name, raising=False)


class TestI18nSettings:
    def test_defaults(self):
        config = I18nSettings()
        assert config.default_locale == "zh-CN"
        assert config.catalog_base_url == "http://127.0.0.1:8000/static/locales"
        assert config.catalog_dir is None
        assert config.storage_key == "ezpay_locale"
        assert config.query_param == "lang"
        assert config.fetch_timeout is None

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("I18N_DEFAULT_LOCALE", "en")
        monkeypatch.setenv("I18N_FETCH_TIMEOUT", "2.5")
        config = I18nSettings()
        assert config.default_locale == "en"
        assert config.fetch_timeout == 2.5

    def test_base_url_trailing_slash_stripped(self):
        config = I18nSettings(I18N_CATALOG_BASE_URL="https://cdn.example.com/locales/")
        assert config.catalog_base_url == "https://cdn.example.com/locales"


class TestSettings:
    def test_subsettings_instantiated(self):
        assert isinstance(Settings().i18n, I18nSettings)

    def test_override_subsettings(self):
        custom = I18nSettings(I18N_DEFAULT_LOCALE="ru")
        assert Settings(i18n=custom).i18n.default_locale == "ru"

    def test_is_production_without_prefix(self):
        assert Settings().is_production is True

    def test_not_production_with_prefix(self, monkeypatch):
        monkeypatch.setenv("PREFIX", "dev-")
        assert Settings().is_production is False
