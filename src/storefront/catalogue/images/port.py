"""Product image storage port (abstract interface).

Image bytes live outside the relational store; the catalogue keeps only the
public URL returned by the adapter.
"""

from abc import ABC, abstractmethod
from typing import BinaryIO


class ImageStore(ABC):
    """Abstract product image store."""

    @abstractmethod
    def store_product_image(self, stream: BinaryIO, filename: str, size: int) -> str | None:
        """Persist an uploaded image and return its public URL, or None when rejected."""
        ...

    @abstractmethod
    def delete_product_image(self, image_url: str | None) -> bool:
        """Remove a previously stored image; True when nothing is left behind."""
        ...
