"""Admin form submissions for catalog records that carry an image."""

import json
from enum import Enum
from typing import Annotated, Any

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from lagom import Container

from application.dtos.form_dtos import FormSubmission, FormSubmissionResponse, Notification
from application.form_controllers.base import FormController
from application.form_controllers.event_form import EventFormController
from application.form_controllers.product_form import ProductFormController
from application.form_controllers.subscription_box_form import SubscriptionBoxFormController
from application.form_controllers.workshop_form import WorkshopFormController
from application.use_cases.record_use_cases import DeleteRecordUseCase
from domain.services.image_urls import resolve_image_url
from domain.value_objects.entity_type import EntityType
from domain.value_objects.pending_upload import PendingUpload
from infrastructure.config import Settings
from interfaces.api.middleware import handle_use_case_errors
from interfaces.api.routes.helpers import _map_failed_submission_to_http_exception
from interfaces.dependencies import get_container

router = APIRouter(prefix="/admin", tags=["admin"])


class CatalogResource(str, Enum):
    EVENTS = "events"
    WORKSHOPS = "workshops"
    PRODUCTS = "products"
    SUBSCRIPTION_BOXES = "subscription-boxes"

    @property
    def entity_type(self) -> EntityType:
        return EntityType.from_resource_path(self.value)


_CONTROLLERS: dict[CatalogResource, type[FormController]] = {
    CatalogResource.EVENTS: EventFormController,
    CatalogResource.WORKSHOPS: WorkshopFormController,
    CatalogResource.PRODUCTS: ProductFormController,
    CatalogResource.SUBSCRIPTION_BOXES: SubscriptionBoxFormController,
}


def parse_fields(raw: str) -> dict[str, Any]:
    """Decode the JSON ``fields`` part of a multipart form."""
    try:
        fields = json.loads(raw or "{}")
    except json.JSONDecodeError:
        fields = None
    if not isinstance(fields, dict):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=Notification(kind="error", message="Form fields must be a JSON object").model_dump(),
        )
    return fields


async def read_pending_upload(
    image: UploadFile | None,
    entity_type: EntityType,
) -> PendingUpload | None:
    """Build the pending upload from the form's file part, if one was chosen."""
    if image is None or not image.filename:
        return None
    return PendingUpload(
        content=await image.read(),
        category=entity_type.image_category,
        filename=image.filename,
        mime_type=image.content_type,
    )


def to_response(submission: FormSubmission, container: Container) -> FormSubmissionResponse:
    if not submission.succeeded or submission.record is None:
        raise _map_failed_submission_to_http_exception(submission)
    app_settings = container[Settings]
    return FormSubmissionResponse(
        notification=submission.notification,
        record=submission.record,
        image_display_url=resolve_image_url(
            submission.record.image,
            app_settings.catalog_api_url,
        ),
    )


@router.post("/{resource}", status_code=status.HTTP_201_CREATED)
async def create_record(
    resource: CatalogResource,
    container: Annotated[Container, Depends(get_container)],
    fields: Annotated[str, Form()] = "{}",
    image: Annotated[UploadFile | None, File()] = None,
) -> FormSubmissionResponse:
    """Create a catalog record, storing its image first when one is attached.

    Returns:
        201 Created: Record committed
        400 Bad Request: Form, image or server-side validation failed
        503 Service Unavailable: Image host or catalog API unavailable

    """
    controller = container[_CONTROLLERS[resource]]
    upload = await read_pending_upload(image, resource.entity_type)
    submission = await controller.submit_create(parse_fields(fields), upload)
    return to_response(submission, container)


@router.put("/{resource}/{record_id}", status_code=status.HTTP_200_OK)
async def update_record(
    resource: CatalogResource,
    record_id: int,
    container: Annotated[Container, Depends(get_container)],
    fields: Annotated[str, Form()] = "{}",
    current_image: Annotated[str | None, Form()] = None,
    image: Annotated[UploadFile | None, File()] = None,
) -> FormSubmissionResponse:
    """Edit a catalog record. A new image replaces ``current_image`` once committed.

    Returns:
        200 OK: Record committed
        400 Bad Request: Form, image or server-side validation failed
        404 Not Found: Record no longer exists
        503 Service Unavailable: Image host or catalog API unavailable

    """
    controller = container[_CONTROLLERS[resource]]
    upload = await read_pending_upload(image, resource.entity_type)
    submission = await controller.submit_update(
        record_id,
        parse_fields(fields),
        upload=upload,
        current_image=current_image or None,
    )
    return to_response(submission, container)


@router.delete("/{resource}/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
@handle_use_case_errors
async def delete_record(
    resource: CatalogResource,
    record_id: int,
    container: Annotated[Container, Depends(get_container)],
) -> None:
    """Delete a catalog record. Its image stays on the image host."""
    use_case = container[DeleteRecordUseCase]
    return await use_case.execute(resource.entity_type, record_id)
