from enum import Enum

GLOBAL_PLACEHOLDER_IMAGE = "/Images/default-placeholder.jpg"


class ImageCategory(str, Enum):
    """Folders on the image host. Each one has its own placeholder image."""

    EVENTS = "events"
    WORKSHOPS = "workshops"
    PRODUCTS = "products"
    SUBSCRIPTION_BOXES = "subscription-boxes"
    PROFILES = "profiles"

    @property
    def default_image(self) -> str:
        """Well-known placeholder for this category. Never deleted."""
        return f"/Images/{self.value}/default.jpg"


DEFAULT_IMAGES = frozenset(
    {GLOBAL_PLACEHOLDER_IMAGE, *(category.default_image for category in ImageCategory)},
)


def is_default_image(ref: str | None) -> bool:
    """Return True when ``ref`` means "no user supplied image"."""
    if not ref or not ref.strip():
        return True
    return ref in DEFAULT_IMAGES
