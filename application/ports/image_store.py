from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from domain.value_objects.image_category import ImageCategory
    from domain.value_objects.pending_upload import PendingUpload


@dataclass(frozen=True)
class StoredImage:
    url: str
    category: ImageCategory


class ImageStore(Protocol):
    """Port for the image hosting backend. Knows nothing about records."""

    async def store(self, upload: PendingUpload) -> StoredImage:
        """Store the upload and return a reference that resolves immediately.

        Either the image exists and a reference is returned, or nothing was
        stored and StorageUnavailableError is raised.
        """
        ...

    async def remove(self, ref: str) -> None:
        """Remove an image. Idempotent.

        Removing a missing image or a placeholder succeeds silently.

        Raises:
            StorageUnavailableError: If the image host cannot be reached

        """
        ...
