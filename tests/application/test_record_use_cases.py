"""Tests for record use cases."""

from __future__ import annotations

import pytest
from returns.result import Failure, Success

from application.use_cases.record_use_cases import (
    ChangeSubscriptionStatusUseCase,
    DeleteRecordUseCase,
)
from domain.exceptions import ServiceUnavailableError, ValidationError
from domain.value_objects.entity_type import EntityType
from domain.value_objects.subscription_status import SubscriptionAction, SubscriptionStatus
from tests.mocks import MockImageStore, MockRecordService


class TestDeleteRecordUseCase:
    """Test DeleteRecordUseCase."""

    @pytest.mark.asyncio
    async def test_delete_success_leaves_image(
        self,
        record_service: MockRecordService,
        image_store: MockImageStore,
    ) -> None:
        record_service.seed(EntityType.EVENT, 4, {"image": "/Images/events/a.jpg"})
        use_case = DeleteRecordUseCase(record_service)

        result = await use_case.execute(EntityType.EVENT, 4)

        assert isinstance(result, Success)
        assert (EntityType.EVENT, 4) not in record_service.records
        assert image_store.call_count == 0

    @pytest.mark.asyncio
    async def test_delete_missing_record(self, record_service: MockRecordService) -> None:
        use_case = DeleteRecordUseCase(record_service)

        result = await use_case.execute(EntityType.PRODUCT, 404)

        assert isinstance(result, Failure)
        assert result.failure().category == "not_found"

    @pytest.mark.asyncio
    async def test_delete_rejected_by_server(self) -> None:
        records = MockRecordService(error=ValidationError("Product has open orders"))
        use_case = DeleteRecordUseCase(records)

        result = await use_case.execute(EntityType.PRODUCT, 1)

        assert isinstance(result, Failure)
        assert result.failure().category == "validation"
        assert result.failure().message == "Product has open orders"

    @pytest.mark.asyncio
    async def test_delete_service_unavailable(self) -> None:
        use_case = DeleteRecordUseCase(MockRecordService(error=ServiceUnavailableError("down")))

        result = await use_case.execute(EntityType.EVENT, 1)

        assert isinstance(result, Failure)
        assert result.failure().category == "service_unavailable"


class TestChangeSubscriptionStatusUseCase:
    """Test ChangeSubscriptionStatusUseCase."""

    @pytest.mark.asyncio
    async def test_pause_active_subscription(self, record_service: MockRecordService) -> None:
        use_case = ChangeSubscriptionStatusUseCase(record_service)

        result = await use_case.execute(8, SubscriptionAction.PAUSE, SubscriptionStatus.ACTIVE)

        assert isinstance(result, Success)
        assert result.unwrap() == {"message": "Subscription paused successfully"}
        assert record_service.subscription_actions == [(8, SubscriptionAction.PAUSE)]

    @pytest.mark.asyncio
    async def test_illegal_transition_rejected_locally(
        self,
        record_service: MockRecordService,
    ) -> None:
        use_case = ChangeSubscriptionStatusUseCase(record_service)

        result = await use_case.execute(8, SubscriptionAction.RESUME, SubscriptionStatus.ACTIVE)

        assert isinstance(result, Failure)
        assert result.failure().message == "Cannot resume a subscription that is active"
        assert record_service.subscription_actions == []

    @pytest.mark.asyncio
    async def test_unknown_status_defers_to_server(self) -> None:
        records = MockRecordService(error=ValidationError("Subscription is not paused"))
        use_case = ChangeSubscriptionStatusUseCase(records)

        result = await use_case.execute(8, SubscriptionAction.RESUME)

        assert isinstance(result, Failure)
        assert result.failure().message == "Subscription is not paused"
