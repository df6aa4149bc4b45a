from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict

from application.form_controllers.base import FormController
from domain.value_objects.entity_type import EntityType

if TYPE_CHECKING:
    from application.dtos.form_dtos import FormSubmission
    from application.dtos.record_dtos import RecordId
    from domain.value_objects.pending_upload import PendingUpload


class ProfileForm(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str | None = None
    """Display only; the profile form never changes the user's name."""


class ProfileFormController(FormController[ProfileForm]):
    """Profile picture changes. Users are never created from this form."""

    entity_type = EntityType.PROFILE
    form_model = ProfileForm

    async def submit_image(
        self,
        user_id: RecordId,
        upload: PendingUpload | None,
        *,
        current_image: str | None = None,
        user_name: str | None = None,
    ) -> FormSubmission:
        if upload is None:
            return self._rejected("Please select an image file")
        return await self.submit_update(
            user_id,
            {"name": user_name},
            upload=upload,
            current_image=current_image,
        )

    def to_payload(self, form: ProfileForm) -> dict[str, Any]:
        return {}
