"""Shared test fixtures and configuration."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Any

import pytest

from application.sagas.image_upsert_saga import ImageUpsertSaga
from tests.mocks import CallLog, MockImageStore, MockRecordService


@pytest.fixture
def call_log() -> CallLog:
    return CallLog()


@pytest.fixture
def image_store(call_log: CallLog) -> MockImageStore:
    return MockImageStore(call_log)


@pytest.fixture
def record_service(call_log: CallLog) -> MockRecordService:
    return MockRecordService(call_log)


@pytest.fixture
def saga(image_store: MockImageStore, record_service: MockRecordService) -> ImageUpsertSaga:
    return ImageUpsertSaga(image_store=image_store, record_service=record_service)


@pytest.fixture
def future_date() -> str:
    """Return an ISO date safely in the future."""
    return (date.today() + timedelta(days=30)).isoformat()


@pytest.fixture
def event_fields(future_date: str) -> dict[str, Any]:
    """Return a valid event form submission."""
    return {
        "category_id": 1,
        "organizer_id": 3,
        "title": "Spring Garden Walk",
        "description": "A guided walk through the community garden",
        "event_date": future_date,
        "event_time": "08:00 AM",
        "location": "Community Garden",
        "price": 15,
        "total_spots": 20,
        "agenda": [{"time": "08:00 AM", "activity": "Welcome"}],
        "highlights": ["Seasonal produce"],
    }


@pytest.fixture
def workshop_fields(future_date: str) -> dict[str, Any]:
    """Return a valid workshop form submission."""
    return {
        "category_id": 2,
        "instructor_id": 5,
        "title": "Composting Basics",
        "description": "Learn to compost at home",
        "workshop_date": future_date,
        "workshop_time": "10:00 AM",
        "duration": "2 hours",
        "location": "Barn",
        "price": 25,
        "total_spots": 12,
    }


@pytest.fixture
def product_fields() -> dict[str, Any]:
    """Return a valid product form submission."""
    return {
        "category_id": 4,
        "name": "Heirloom Tomatoes",
        "price": 4.5,
        "unit": "kg",
        "description": "Vine ripened",
        "stock_quantity": 30,
        "details": {"variety": "Brandywine"},
    }


@pytest.fixture
def box_fields() -> dict[str, Any]:
    """Return a valid subscription box form submission."""
    return {
        "name": "Weekly Veg Box",
        "description": "Seasonal vegetables every week",
        "price": 29.99,
        "frequency": "weekly",
        "items": [{"item_name": "Carrots", "quantity": 2}],
    }
