from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from application.dtos.record_dtos import EntityRecord, RecordId
    from domain.value_objects.entity_type import EntityType
    from domain.value_objects.subscription_status import SubscriptionAction


class RecordService(Protocol):
    """Port for the catalog record API. Knows nothing about images.

    All methods raise ValidationError when the server rejects the payload
    and ServiceUnavailableError on network or backend failures. Methods
    scoped to an id also raise RecordNotFoundError.
    """

    async def create(self, entity_type: EntityType, payload: dict[str, Any]) -> EntityRecord: ...

    async def update(
        self,
        entity_type: EntityType,
        record_id: RecordId,
        payload: dict[str, Any],
    ) -> EntityRecord: ...

    async def get(self, entity_type: EntityType, record_id: RecordId) -> EntityRecord: ...

    async def delete(self, entity_type: EntityType, record_id: RecordId) -> None: ...

    async def apply_subscription_action(
        self,
        subscription_id: RecordId,
        action: SubscriptionAction,
    ) -> dict[str, Any]:
        """Move a customer subscription to another lifecycle state."""
        ...
