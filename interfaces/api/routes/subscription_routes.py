from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query, status
from lagom import Container

from application.use_cases.record_use_cases import ChangeSubscriptionStatusUseCase
from domain.value_objects.subscription_status import SubscriptionAction, SubscriptionStatus
from interfaces.api.middleware import handle_use_case_errors
from interfaces.dependencies import get_container

router = APIRouter(prefix="/admin/subscriptions", tags=["subscriptions"])


@router.put("/{subscription_id}/{action}", status_code=status.HTTP_200_OK)
@handle_use_case_errors
async def change_subscription_status(
    subscription_id: int,
    action: SubscriptionAction,
    container: Annotated[Container, Depends(get_container)],
    current_status: Annotated[SubscriptionStatus | None, Query()] = None,
) -> dict[str, Any]:
    """Cancel, pause, resume or reactivate a subscription."""
    use_case = container[ChangeSubscriptionStatusUseCase]
    return await use_case.execute(subscription_id, action, current_status)
