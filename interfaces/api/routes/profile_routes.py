from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from lagom import Container

from application.dtos.form_dtos import FormSubmissionResponse
from application.form_controllers.profile_form import ProfileFormController
from domain.value_objects.entity_type import EntityType
from interfaces.api.routes.catalog_routes import read_pending_upload, to_response
from interfaces.dependencies import get_container

router = APIRouter(prefix="/admin/profiles", tags=["profiles"])


@router.put("/{user_id}/image", status_code=status.HTTP_200_OK)
async def update_profile_image(
    user_id: int,
    container: Annotated[Container, Depends(get_container)],
    image: Annotated[UploadFile, File()],
    current_image: Annotated[str | None, Form()] = None,
    user_name: Annotated[str | None, Form()] = None,
) -> FormSubmissionResponse:
    """Replace a user's profile picture."""
    controller = container[ProfileFormController]
    upload = await read_pending_upload(image, EntityType.PROFILE)
    submission = await controller.submit_image(
        user_id,
        upload,
        current_image=current_image or None,
        user_name=user_name,
    )
    return to_response(submission, container)
