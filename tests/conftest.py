import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_configure(config):
    # Protean reads PROTEAN_ENV when the domain is constructed, which happens
    # while test modules are imported during collection.
    os.environ["PROTEAN_ENV"] = config.option.env


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = Path(item.fspath)

        if "/domain/" in str(test_path):
            item.add_marker(pytest.mark.domain)
        elif "/application/" in str(test_path):
            item.add_marker(pytest.mark.application)
        elif "/integration/" in str(test_path):
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session")
def _storefront_domain():
    """Initialize the storefront domain once per session."""
    from storefront.registry import init_domain

    return init_domain()


@pytest.fixture(scope="session", autouse=True)
def setup_db(_storefront_domain):
    from storefront.utils.db import drop_db, setup_db

    setup_db(_storefront_domain)

    yield

    drop_db(_storefront_domain)


@pytest.fixture(autouse=True)
def run_around_tests(_storefront_domain):
    """Push domain context before each test, cleanup after."""
    ctx = _storefront_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()


@pytest.fixture(autouse=True)
def image_store(tmp_path):
    """Product images land in a per-test directory."""
    from storefront.catalogue.images import reset_image_store, set_image_store
    from storefront.catalogue.images.filesystem import FilesystemImageStore

    store = FilesystemImageStore(root=tmp_path)
    set_image_store(store)
    yield store
    reset_image_store()


# ---------------------------------------------------------------------------
# Catalogue helpers shared by every area
# ---------------------------------------------------------------------------
@pytest.fixture()
def category_id():
    from protean import current_domain

    from storefront.catalogue.category.management import CreateCategory

    return current_domain.process(CreateCategory(name="Hookahs", description="Hookah sets"), asynchronous=False)


@pytest.fixture()
def make_product(category_id):
    """Factory creating products through the CreateProduct command."""
    from protean import current_domain

    from storefront.catalogue.product.creation import CreateProduct

    def _make(name="Glass hookah", price=100.0, stock=10, description=None, category=None, image_url=None):
        command = CreateProduct(
            name=name,
            description=description,
            price=price,
            stock=stock,
            image_url=image_url,
            category_id=category or category_id,
        )
        return current_domain.process(command, asynchronous=False)

    return _make
