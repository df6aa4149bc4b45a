from fastapi import HTTPException, status

from application.dtos.errors import AppError
from application.dtos.form_dtos import FormSubmission

_STATUS_BY_CATEGORY = {
    "validation": status.HTTP_400_BAD_REQUEST,
    "not_found": status.HTTP_404_NOT_FOUND,
    "storage_unavailable": status.HTTP_503_SERVICE_UNAVAILABLE,
    "service_unavailable": status.HTTP_503_SERVICE_UNAVAILABLE,
}


def _status_for_category(category: str | None) -> int:
    if category is None:
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    return _STATUS_BY_CATEGORY.get(category, status.HTTP_500_INTERNAL_SERVER_ERROR)


def _map_app_error_to_http_exception(error: AppError) -> HTTPException:
    """Map application layer errors to appropriate HTTP exceptions."""
    status_code = _status_for_category(error.category)
    if status_code == status.HTTP_500_INTERNAL_SERVER_ERROR:
        # Unknown error category
        return HTTPException(status_code=status_code, detail="Internal server error")
    if status_code == status.HTTP_503_SERVICE_UNAVAILABLE:
        return HTTPException(status_code=status_code, detail="Service temporarily unavailable")
    return HTTPException(status_code=status_code, detail=error.message)


def _map_failed_submission_to_http_exception(submission: FormSubmission) -> HTTPException:
    """Return the notification as the error body so the form can show it inline."""
    return HTTPException(
        status_code=_status_for_category(submission.error_category),
        detail=submission.notification.model_dump(),
    )
