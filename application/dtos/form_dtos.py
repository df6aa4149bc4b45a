from typing import Literal

from pydantic import BaseModel, Field

from application.dtos.record_dtos import EntityRecord


class Notification(BaseModel):
    """Banner shown above an admin form. The form stays open on error."""

    kind: Literal["success", "error"]
    message: str
    dismissible: bool = True


class FormSubmission(BaseModel):
    notification: Notification = Field(..., description="What to tell the admin")
    record: EntityRecord | None = Field(None, description="Committed record on success")
    error_category: str | None = Field(None, description="AppError category on failure")

    @property
    def succeeded(self) -> bool:
        return self.record is not None


class FormSubmissionResponse(BaseModel):
    notification: Notification
    record: EntityRecord
    image_display_url: str = Field(..., description="Browser-loadable URL of the record's image")
