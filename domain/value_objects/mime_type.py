from enum import Enum

MAX_IMAGE_BYTES = 5 * 1024 * 1024


class ImageMimeType(str, Enum):
    """Represent image content types accepted by the image host."""

    JPEG = "image/jpeg"
    JPG = "image/jpg"  # legacy alias sent by some browsers
    PNG = "image/png"
    WEBP = "image/webp"
    AVIF = "image/avif"
    JFIF = "image/jfif"

    @classmethod
    def is_accepted(cls, mime_type: str | None) -> bool:
        return mime_type in {member.value for member in cls}
