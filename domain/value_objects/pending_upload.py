from pydantic import BaseModel, ConfigDict, Field

from domain.value_objects.image_category import ImageCategory
from domain.value_objects.mime_type import MAX_IMAGE_BYTES, ImageMimeType


class PendingUpload(BaseModel):
    """Image selected in an admin form and not yet stored.

    Owned by the caller and consumed by a single upsert. Never persisted.
    """

    model_config = ConfigDict(frozen=True)

    content: bytes = Field(..., repr=False)
    """Raw file bytes as received from the form."""

    category: ImageCategory
    """Folder the image is stored under on the image host."""

    filename: str | None = None
    """Original filename, forwarded to the image host."""

    mime_type: str | None = None
    """Declared content type of the file."""

    @property
    def size_bytes(self) -> int:
        return len(self.content)

    def validation_problem(self) -> str | None:
        """Return a user-facing message when the file must not be uploaded."""
        if not self.content:
            return "The selected file is empty"
        if not self.mime_type or not self.mime_type.startswith("image/"):
            return "Please select an image file"
        if not ImageMimeType.is_accepted(self.mime_type):
            return "Unsupported image format. Use JPEG, PNG, WEBP or AVIF"
        if self.size_bytes > MAX_IMAGE_BYTES:
            return "File size should be less than 5MB"
        return None
