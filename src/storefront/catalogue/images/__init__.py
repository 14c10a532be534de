"""Product image store factory.

Provides get_image_store() / set_image_store() so tests can point uploads at
a temporary directory. STOREFRONT_IMAGE_ROOT chooses the default root.
"""

import os

from storefront.catalogue.images.filesystem import FilesystemImageStore
from storefront.catalogue.images.port import ImageStore

_current_store: ImageStore | None = None


def get_image_store() -> ImageStore:
    """Return the current image store. Defaults to the filesystem store."""
    global _current_store
    if _current_store is None:
        _current_store = FilesystemImageStore(os.getenv("STOREFRONT_IMAGE_ROOT", "media"))
    return _current_store


def set_image_store(store: ImageStore) -> None:
    """Override the active image store (useful for tests)."""
    global _current_store
    _current_store = store


def reset_image_store() -> None:
    """Reset to default store."""
    global _current_store
    _current_store = None
