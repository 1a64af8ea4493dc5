"""Feature-level fixtures for i18n system tests."""

import pytest

from pagelocale.i18n import CatalogStore, HostContext, MemoryKeyValueStore, Translator
from tests.factories.document import make_marked_document
from tests.factories.i18n import make_catalog_source


@pytest.fixture
def catalog_source():
    """Stub source serving en, zh-CN, zh-TW and fa; everything else fails."""
    return make_catalog_source()


@pytest.fixture
def catalog_store(catalog_source, registry):
    return CatalogStore(catalog_source, registry.default_code)


@pytest.fixture
def translator(catalog_store, state):
    return Translator(catalog_store, state)


@pytest.fixture
def document():
    return make_marked_document()


@pytest.fixture
def key_value_store():
    return MemoryKeyValueStore()


@pytest.fixture
def host():
    """Host with no URL override and no environment language."""
    return HostContext(url=None, environment_language=None)
