"""Shared behaviour of the admin form controllers.

A controller validates the submitted fields and the selected image, then
hands a single command to the upsert saga and turns its outcome into a
notification. It holds no failure handling of its own.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Any, ClassVar

import pydantic
import structlog
from pydantic import BaseModel
from returns.result import Success

from application.dtos.form_dtos import FormSubmission, Notification
from application.dtos.record_dtos import UpsertCommand

if TYPE_CHECKING:
    from collections.abc import Mapping

    from application.dtos.errors import UpsertFailure
    from application.dtos.record_dtos import RecordId, UpsertOutcome
    from application.sagas.image_upsert_saga import ImageUpsertSaga
    from domain.value_objects.entity_type import EntityType
    from domain.value_objects.pending_upload import PendingUpload

logger = structlog.get_logger()


def require_future_date(value: date, label: str) -> date:
    """Reject today and past dates."""
    if value <= date.today():
        msg = f"{label} date must be in the future. Today and past dates are not allowed."
        raise ValueError(msg)
    return value


def describe_validation_error(exc: pydantic.ValidationError) -> str:
    """Return a one-line message for the first invalid field."""
    error = exc.errors()[0]
    message = str(error["msg"]).removeprefix("Value error, ")
    field = ".".join(str(part) for part in error["loc"])
    return f"{field}: {message}" if field else message


class FormController[FormT: BaseModel]:
    """Base class for per-entity admin form controllers."""

    entity_type: ClassVar[EntityType]
    form_model: ClassVar[type[BaseModel]]

    def __init__(self, upsert_saga: ImageUpsertSaga) -> None:
        self.upsert_saga = upsert_saga

    async def submit_create(
        self,
        fields: Mapping[str, Any],
        upload: PendingUpload | None = None,
    ) -> FormSubmission:
        if not self.entity_type.supports_create:
            return self._rejected(f"{self.entity_type.label} records cannot be created here")
        return await self._submit(fields, upload, record_id=None, current_image=None)

    async def submit_update(
        self,
        record_id: RecordId,
        fields: Mapping[str, Any],
        upload: PendingUpload | None = None,
        current_image: str | None = None,
    ) -> FormSubmission:
        return await self._submit(fields, upload, record_id=record_id, current_image=current_image)

    async def _submit(
        self,
        fields: Mapping[str, Any],
        upload: PendingUpload | None,
        *,
        record_id: RecordId | None,
        current_image: str | None,
    ) -> FormSubmission:
        try:
            form: FormT = self.form_model.model_validate(dict(fields))  # type: ignore[assignment]
        except pydantic.ValidationError as e:
            return self._rejected(describe_validation_error(e))

        if upload is not None:
            problem = upload.validation_problem()
            if problem is not None:
                return self._rejected(problem)

        display_name = self.display_name(form)
        command = UpsertCommand(
            entity_type=self.entity_type,
            payload=self.to_payload(form),
            record_id=record_id,
            upload=upload,
            current_image=current_image,
            display_name=display_name,
        )
        outcome = await self.upsert_saga.execute(command)
        return self.render(outcome, display_name=display_name, created=record_id is None)

    def to_payload(self, form: FormT) -> dict[str, Any]:
        return form.model_dump(mode="json", exclude_none=True)

    def display_name(self, form: FormT) -> str:
        for attribute in ("title", "name"):
            value = getattr(form, attribute, None)
            if value:
                return str(value)
        return self.entity_type.label

    def render(self, outcome: UpsertOutcome, *, display_name: str, created: bool) -> FormSubmission:
        """Translate the saga outcome into what the admin sees."""
        if isinstance(outcome, Success):
            verb = "created" if created else "updated"
            return FormSubmission(
                notification=Notification(
                    kind="success",
                    message=f"{self.entity_type.label} '{display_name}' {verb} successfully",
                ),
                record=outcome.unwrap(),
            )

        failure: UpsertFailure = outcome.failure()
        return FormSubmission(
            notification=Notification(kind="error", message=self._failure_message(failure)),
            error_category=failure.category,
        )

    def _failure_message(self, failure: UpsertFailure) -> str:
        noun = self.entity_type.label.lower()
        if failure.category == "validation":
            return failure.message
        if failure.category == "not_found":
            return f"This {noun} no longer exists. Close the form and reload the list."
        return f"Could not save {noun} '{failure.entity_display_name}'. Please try again."

    def _rejected(self, message: str) -> FormSubmission:
        logger.info(
            "form_rejected",
            entity_type=self.entity_type.value,
            reason=message,
        )
        return FormSubmission(
            notification=Notification(kind="error", message=message),
            error_category="validation",
        )
