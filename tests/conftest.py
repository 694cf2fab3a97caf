"""Shared fixtures for i18n-cache tests.

Builds two domains of PO catalogs in a temporary directory:

- domain1/es.po: "Yes", context-dependent "Welcome", "item", a plural entry
- domain2/es.po: "Required", a plural entry, a multiline message
- domain2/ru.po: "Required" and a three-form plural entry
"""

import pytest

from i18ncache.cache.memory import InMemoryCache
from i18ncache.core.logging import configure_logging
from i18ncache.i18n.translator import Translator
from tests.factories.i18n import DOMAIN1_ES, DOMAIN2_ES, DOMAIN2_RU, write_po_file


@pytest.fixture(scope="session", autouse=True)
def quiet_logging():
    """Silence library log output for the whole run."""
    configure_logging()


@pytest.fixture
def catalog_dirs(tmp_path):
    """Create domain1 and domain2 catalog directories.

    Returns:
        Tuple of (domain1_dir, domain2_dir).
    """
    domain1 = tmp_path / "domain1"
    domain2 = tmp_path / "domain2"
    write_po_file(domain1 / "es.po", DOMAIN1_ES)
    write_po_file(domain2 / "es.po", DOMAIN2_ES)
    write_po_file(domain2 / "ru.po", DOMAIN2_RU)
    return domain1, domain2


@pytest.fixture
def domain1_dir(catalog_dirs):
    return catalog_dirs[0]


@pytest.fixture
def domain2_dir(catalog_dirs):
    return catalog_dirs[1]


@pytest.fixture
def snapshot_dir(tmp_path):
    """Empty directory for compiled snapshots."""
    path = tmp_path / "snapshots"
    path.mkdir()
    return path


@pytest.fixture
def memory_cache():
    """Unbounded in-memory cache backend."""
    return InMemoryCache()


def _bind(translator, catalog_dirs):
    domain1, domain2 = catalog_dirs
    translator.bind_domain("dom1", domain1)
    translator.bind_domain("dom2", domain2)
    translator.set_default_domain("dom2")
    return translator


@pytest.fixture
def local_translator(catalog_dirs):
    """Translator without a backend, Spanish active."""
    translator = _bind(Translator(), catalog_dirs)
    translator.set_language("es")
    return translator


@pytest.fixture
def cached_translator(catalog_dirs, memory_cache):
    """Translator backed by an in-memory cache, Spanish active."""
    translator = _bind(Translator(cache=memory_cache), catalog_dirs)
    translator.set_language("es")
    return translator
