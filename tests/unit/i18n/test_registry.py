"""Tests for pagelocale.i18n.registry module."""

import pytest

from pagelocale.i18n import DEFAULT_LOCALES, Direction, LocaleDescriptor, LocaleRegistry


class TestLocaleRegistry:
    def test_default_table_order(self, registry):
        assert registry.codes() == ["en", "zh-CN", "zh-TW", "ru", "fa", "vi", "my"]

    def test_all_returns_descriptors_in_registration_order(self, registry):
        assert registry.all() == list(DEFAULT_LOCALES)

    def test_default_code(self, registry):
        assert registry.default_code == "zh-CN"
        assert registry.default.display_name == "简体中文"

    def test_has(self, registry):
        assert registry.has("fa")
        assert not registry.has("de")
        assert not registry.has(None)

    def test_get(self, registry):
        assert registry.get("fa").direction == Direction.RTL
        assert registry.get("de") is None
        assert registry.get(None) is None

    def test_only_persian_is_rtl(self, registry):
        assert [d.code for d in registry if d.is_rtl] == ["fa"]

    def test_container_protocol(self, registry):
        assert "ru" in registry
        assert len(registry) == 7

    def test_all_returns_copy(self, registry):
        registry.all().clear()
        assert len(registry.all()) == 7

    def test_duplicate_code_rejected(self):
        with pytest.raises(ValueError):
            LocaleRegistry(
                [LocaleDescriptor("en", "English"), LocaleDescriptor("en", "Again")],
                default_code="en",
            )

    def test_unregistered_default_rejected(self):
        with pytest.raises(ValueError):
            LocaleRegistry([LocaleDescriptor("en", "English")], default_code="fr")
