"""Root fixtures shared by every test package."""

import pytest

from pagelocale.i18n import LocaleRegistry, LocaleState


@pytest.fixture
def registry():
    """Registry with the built-in locale table (default zh-CN)."""
    return LocaleRegistry()


@pytest.fixture
def state(registry):
    """Fresh active-locale state on the registry default."""
    return LocaleState(code=registry.default_code)
