from typing import Any

from pydantic import BaseModel, Field
from returns.result import Result

from application.dtos.errors import UpsertFailure
from domain.value_objects.entity_type import EntityType
from domain.value_objects.pending_upload import PendingUpload

RecordId = int | str


class EntityRecord(BaseModel):
    """A committed catalog record as returned by the record service."""

    entity_type: EntityType = Field(..., description="Kind of catalog record")
    record_id: RecordId | None = Field(None, description="Identifier assigned by the catalog API")
    fields: dict[str, Any] = Field(default_factory=dict, description="Entity specific fields")

    @property
    def image(self) -> str | None:
        return self.fields.get(self.entity_type.image_field)


class UpsertCommand(BaseModel):
    """One admin form submission handed to the upsert saga."""

    entity_type: EntityType
    payload: dict[str, Any] = Field(default_factory=dict)
    record_id: RecordId | None = Field(None, description="Target record; None creates a new one")
    upload: PendingUpload | None = Field(None, description="Newly selected image, if any")
    current_image: str | None = Field(None, description="Image reference held before the edit")
    display_name: str = Field("", description="Name shown to the admin in notifications")

    @property
    def is_update(self) -> bool:
        return self.record_id is not None


UpsertOutcome = Result[EntityRecord, UpsertFailure]
