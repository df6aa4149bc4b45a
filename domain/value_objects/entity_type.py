from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from domain.value_objects.image_category import ImageCategory


@dataclass(frozen=True)
class _EntityShape:
    resource_path: str
    image_field: str
    image_category: ImageCategory
    label: str
    id_field: str
    wrapper_key: str
    supports_create: bool = True


class EntityType(str, Enum):
    """Catalog record kinds that carry an image."""

    EVENT = "event"
    WORKSHOP = "workshop"
    PRODUCT = "product"
    SUBSCRIPTION_BOX = "subscription_box"
    PROFILE = "profile"

    @property
    def _shape(self) -> _EntityShape:
        return _SHAPES[self]

    @property
    def resource_path(self) -> str:
        """Collection path on the catalog API, e.g. ``events``."""
        return self._shape.resource_path

    @property
    def image_field(self) -> str:
        """Name of the payload field holding the image reference."""
        return self._shape.image_field

    @property
    def image_category(self) -> ImageCategory:
        return self._shape.image_category

    @property
    def label(self) -> str:
        return self._shape.label

    @property
    def id_field(self) -> str:
        return self._shape.id_field

    @property
    def wrapper_key(self) -> str:
        return self._shape.wrapper_key

    @property
    def supports_create(self) -> bool:
        return self._shape.supports_create

    @classmethod
    def from_resource_path(cls, resource_path: str) -> EntityType:
        for entity_type in cls:
            if entity_type.resource_path == resource_path:
                return entity_type
        msg = f"Unknown resource path: {resource_path}"
        raise ValueError(msg)


_SHAPES: dict[EntityType, _EntityShape] = {
    EntityType.EVENT: _EntityShape(
        resource_path="events",
        image_field="image",
        image_category=ImageCategory.EVENTS,
        label="Event",
        id_field="event_id",
        wrapper_key="event",
    ),
    EntityType.WORKSHOP: _EntityShape(
        resource_path="workshops",
        image_field="image",
        image_category=ImageCategory.WORKSHOPS,
        label="Workshop",
        id_field="workshop_id",
        wrapper_key="workshop",
    ),
    EntityType.PRODUCT: _EntityShape(
        resource_path="products",
        image_field="image",
        image_category=ImageCategory.PRODUCTS,
        label="Product",
        id_field="product_id",
        wrapper_key="product",
    ),
    EntityType.SUBSCRIPTION_BOX: _EntityShape(
        resource_path="subscription-boxes",
        image_field="image_url",
        image_category=ImageCategory.SUBSCRIPTION_BOXES,
        label="Subscription box",
        id_field="box_id",
        wrapper_key="box",
    ),
    EntityType.PROFILE: _EntityShape(
        resource_path="users",
        image_field="profile_image",
        image_category=ImageCategory.PROFILES,
        label="Profile",
        id_field="user_id",
        wrapper_key="user",
        supports_create=False,
    ),
}
