from typing import Any

import structlog
from returns.result import Failure, Result, Success

from application.dtos.errors import AppError
from application.dtos.record_dtos import RecordId
from application.ports.record_service import RecordService
from domain.exceptions import RecordNotFoundError, ServiceUnavailableError, ValidationError
from domain.value_objects.entity_type import EntityType
from domain.value_objects.subscription_status import SubscriptionAction, SubscriptionStatus

logger = structlog.get_logger()


class DeleteRecordUseCase:
    """Delete a catalog record.

    The record's image is left on the image host. Whether it should be
    removed along with the record has not been decided.
    """

    def __init__(self, record_service: RecordService) -> None:
        self.record_service = record_service

    async def execute(
        self,
        entity_type: EntityType,
        record_id: RecordId,
    ) -> Result[None, AppError]:
        try:
            await self.record_service.delete(entity_type, record_id)
        except RecordNotFoundError as e:
            return Failure(AppError("not_found", f"{entity_type.label} not found: {e!s}"))
        except ValidationError as e:
            return Failure(AppError("validation", str(e)))
        except ServiceUnavailableError as e:
            return Failure(AppError("service_unavailable", f"Catalog API unavailable: {e!s}"))

        logger.info("record_deleted", entity_type=entity_type.value, record_id=record_id)
        return Success(None)


class ChangeSubscriptionStatusUseCase:
    """Cancel, pause, resume or reactivate a customer subscription."""

    def __init__(self, record_service: RecordService) -> None:
        self.record_service = record_service

    async def execute(
        self,
        subscription_id: RecordId,
        action: SubscriptionAction,
        current_status: SubscriptionStatus | None = None,
    ) -> Result[dict[str, Any], AppError]:
        """Apply a lifecycle action.

        Args:
            subscription_id: Subscription to change
            action: Requested transition
            current_status: Status the caller last saw. When given, illegal
                transitions are rejected without calling the catalog API.

        Returns:
            Result containing the API response body or an error

        """
        if current_status is not None and not action.allowed_from(current_status):
            return Failure(
                AppError(
                    "validation",
                    f"Cannot {action.value} a subscription that is {current_status.value}",
                ),
            )

        try:
            body = await self.record_service.apply_subscription_action(subscription_id, action)
        except RecordNotFoundError as e:
            return Failure(AppError("not_found", f"Subscription not found: {e!s}"))
        except ValidationError as e:
            return Failure(AppError("validation", str(e)))
        except ServiceUnavailableError as e:
            return Failure(AppError("service_unavailable", f"Catalog API unavailable: {e!s}"))

        logger.info(
            "subscription_status_changed",
            subscription_id=subscription_id,
            action=action.value,
            status=action.target_status.value,
        )
        return Success(body)
