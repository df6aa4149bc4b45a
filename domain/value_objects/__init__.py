from .entity_type import EntityType
from .image_category import GLOBAL_PLACEHOLDER_IMAGE, ImageCategory, is_default_image
from .mime_type import MAX_IMAGE_BYTES, ImageMimeType
from .pending_upload import PendingUpload
from .subscription_status import SubscriptionAction, SubscriptionStatus

__all__ = [
    "GLOBAL_PLACEHOLDER_IMAGE",
    "MAX_IMAGE_BYTES",
    "EntityType",
    "ImageCategory",
    "ImageMimeType",
    "PendingUpload",
    "SubscriptionAction",
    "SubscriptionStatus",
    "is_default_image",
]
