"""Filesystem adapter for product images.

Files are written under `<root>/images/products/` with a random name and the
original (lower-cased) extension, and served as `/images/products/<name>`.
"""

import shutil
from pathlib import Path
from typing import BinaryIO
from uuid import uuid4

from storefront.catalogue.images.port import ImageStore
from storefront.constants import ALLOWED_IMAGE_EXTENSIONS, MAX_IMAGE_SIZE_BYTES, PRODUCT_IMAGE_URL_PREFIX
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class FilesystemImageStore(ImageStore):
    def __init__(self, root: str | Path = "media"):
        self.directory = Path(root) / PRODUCT_IMAGE_URL_PREFIX.strip("/")
        if not self.directory.exists():
            self.directory.mkdir(parents=True)
            logger.info("image_directory_created", directory=str(self.directory))

    def store_product_image(self, stream: BinaryIO, filename: str, size: int) -> str | None:
        if size > MAX_IMAGE_SIZE_BYTES:
            logger.warning("image_rejected_too_large", size=size, max_size=MAX_IMAGE_SIZE_BYTES)
            return None

        extension = Path(filename or "").suffix.lower()
        if extension not in ALLOWED_IMAGE_EXTENSIONS:
            logger.warning("image_rejected_extension", extension=extension)
            return None

        stored_name = f"{uuid4()}{extension}"
        with open(self.directory / stored_name, "wb") as target:
            shutil.copyfileobj(stream, target)

        url = f"{PRODUCT_IMAGE_URL_PREFIX}{stored_name}"
        logger.info("image_stored", url=url)
        return url

    def delete_product_image(self, image_url: str | None) -> bool:
        if not image_url or not image_url.strip():
            return True

        if not image_url.lower().startswith(PRODUCT_IMAGE_URL_PREFIX):
            logger.warning("image_delete_outside_directory", url=image_url)
            return False

        path = self.directory / Path(image_url).name
        if not path.is_file():
            return False

        path.unlink()
        logger.info("image_deleted", url=image_url)
        return True
