"""Tests for infrastructure components."""

from __future__ import annotations

import json
from collections.abc import Callable

import httpx
import pytest

from application.ports.image_store import StoredImage
from domain.exceptions import (
    RecordNotFoundError,
    ServiceUnavailableError,
    StorageUnavailableError,
    ValidationError,
)
from domain.value_objects.entity_type import EntityType
from domain.value_objects.image_category import ImageCategory
from domain.value_objects.subscription_status import SubscriptionAction
from infrastructure.config import Settings
from infrastructure.di.container import create_container
from infrastructure.image_stores.http_image_store import HttpImageStore
from infrastructure.record_services.http_record_service import HttpRecordService
from interfaces.dependencies import get_container
from tests.mocks import make_upload

BASE_URL = "http://catalog.test"

Handler = Callable[[httpx.Request], httpx.Response]


def _client(handler: Handler, requests: list[httpx.Request]) -> httpx.AsyncClient:
    def _recording(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return handler(request)

    return httpx.AsyncClient(transport=httpx.MockTransport(_recording))


class TestHttpImageStore:
    """Test HttpImageStore against a mocked upload endpoint."""

    @pytest.mark.asyncio
    async def test_store_posts_multipart_image(self) -> None:
        requests: list[httpx.Request] = []
        client = _client(
            lambda _: httpx.Response(200, json={"imageUrl": "/Images/events/abc.jpg"}),
            requests,
        )
        store = HttpImageStore(BASE_URL, client=client)

        stored = await store.store(make_upload(ImageCategory.EVENTS, "abc.jpg"))

        assert stored == StoredImage(url="/Images/events/abc.jpg", category=ImageCategory.EVENTS)
        request = requests[0]
        assert request.method == "POST"
        assert request.url.path == "/api/upload"
        assert request.url.params["type"] == "events"
        assert set(request.url.params) == {"type"}
        body = request.read()
        assert b'name="image"; filename="abc.jpg"' in body
        assert b"image/jpeg" in body

    @pytest.mark.parametrize(
        "response",
        [
            httpx.Response(400, json={"error": "Only image files are allowed!"}),
            httpx.Response(500, text="boom"),
            httpx.Response(200, text="not json"),
            httpx.Response(200, json={"message": "ok"}),
        ],
    )
    @pytest.mark.asyncio
    async def test_store_failures(self, response: httpx.Response) -> None:
        store = HttpImageStore(BASE_URL, client=_client(lambda _: response, []))

        with pytest.raises(StorageUnavailableError):
            await store.store(make_upload(ImageCategory.EVENTS))

    @pytest.mark.asyncio
    async def test_store_unreachable(self) -> None:
        def _refuse(request: httpx.Request) -> httpx.Response:
            msg = "connection refused"
            raise httpx.ConnectError(msg, request=request)

        store = HttpImageStore(BASE_URL, client=_client(_refuse, []))

        with pytest.raises(StorageUnavailableError, match="unreachable"):
            await store.store(make_upload(ImageCategory.EVENTS))

    @pytest.mark.asyncio
    async def test_remove_sends_delete(self) -> None:
        requests: list[httpx.Request] = []
        client = _client(lambda _: httpx.Response(200, json={"message": "deleted"}), requests)
        store = HttpImageStore(BASE_URL, client=client)

        await store.remove("/Images/events/abc.jpg")

        assert requests[0].method == "DELETE"
        assert requests[0].url.params["imageUrl"] == "/Images/events/abc.jpg"

    @pytest.mark.asyncio
    async def test_remove_is_idempotent(self) -> None:
        client = _client(lambda _: httpx.Response(404, json={"error": "Not found"}), [])
        store = HttpImageStore(BASE_URL, client=client)

        await store.remove("/Images/events/gone.jpg")
        await store.remove("/Images/events/gone.jpg")

    @pytest.mark.asyncio
    async def test_remove_skips_placeholders(self) -> None:
        requests: list[httpx.Request] = []
        store = HttpImageStore(BASE_URL, client=_client(lambda _: httpx.Response(200), requests))

        await store.remove("/Images/events/default.jpg")
        await store.remove("/Images/default-placeholder.jpg")

        assert requests == []

    @pytest.mark.asyncio
    async def test_remove_server_error(self) -> None:
        client = _client(lambda _: httpx.Response(503), [])
        store = HttpImageStore(BASE_URL, client=client)

        with pytest.raises(StorageUnavailableError):
            await store.remove("/Images/events/abc.jpg")


class TestHttpRecordService:
    """Test HttpRecordService against a mocked catalog API."""

    @pytest.mark.asyncio
    async def test_create_reads_typed_id(self) -> None:
        requests: list[httpx.Request] = []
        client = _client(
            lambda _: httpx.Response(
                201,
                json={"message": "Event created successfully", "event_id": 42},
            ),
            requests,
        )
        service = HttpRecordService(BASE_URL, token="secret", client=client)

        record = await service.create(EntityType.EVENT, {"title": "Walk", "image": "/i.jpg"})

        assert record.record_id == 42
        assert record.image == "/i.jpg"
        assert "message" not in record.fields
        request = requests[0]
        assert request.method == "POST"
        assert request.url.path == "/api/events"
        assert request.headers["Authorization"] == "Bearer secret"
        assert json.loads(request.read()) == {"title": "Walk", "image": "/i.jpg"}

    @pytest.mark.asyncio
    async def test_update_without_body_keeps_request_id(self) -> None:
        requests: list[httpx.Request] = []
        client = _client(lambda _: httpx.Response(200, json={"message": "Updated"}), requests)
        service = HttpRecordService(BASE_URL, client=client)

        record = await service.update(
            EntityType.SUBSCRIPTION_BOX,
            3,
            {"name": "Box", "image_url": "/Images/subscription-boxes/b.jpg"},
        )

        assert record.record_id == 3
        assert record.image == "/Images/subscription-boxes/b.jpg"
        assert requests[0].method == "PUT"
        assert requests[0].url.path == "/api/subscription-boxes/3"
        assert "Authorization" not in requests[0].headers

    @pytest.mark.asyncio
    async def test_profile_update_sends_only_profile_image(self) -> None:
        requests: list[httpx.Request] = []
        client = _client(lambda _: httpx.Response(200, json={"message": "Updated"}), requests)
        service = HttpRecordService(BASE_URL, client=client)

        record = await service.update(EntityType.PROFILE, 12, {"profile_image": "/Images/profiles/me.jpg"})

        assert record.image == "/Images/profiles/me.jpg"
        assert requests[0].method == "PUT"
        assert requests[0].url.path == "/api/users/12"
        assert json.loads(requests[0].read()) == {"profile_image": "/Images/profiles/me.jpg"}

    @pytest.mark.asyncio
    async def test_get_unwraps_record(self) -> None:
        client = _client(
            lambda _: httpx.Response(
                200,
                json={"product": {"product_id": 5, "name": "Tomatoes", "image": "/t.jpg"}},
            ),
            [],
        )
        service = HttpRecordService(BASE_URL, client=client)

        record = await service.get(EntityType.PRODUCT, 5)

        assert record.record_id == 5
        assert record.fields["name"] == "Tomatoes"
        assert record.image == "/t.jpg"

    @pytest.mark.parametrize(
        ("response", "error_type", "message"),
        [
            (httpx.Response(404, json={"message": "Event not found"}), RecordNotFoundError, "Event not found"),
            (httpx.Response(400, json={"error": "Title is required"}), ValidationError, "Title is required"),
            (httpx.Response(403, json={"message": "Admin only"}), ValidationError, "Admin only"),
            (httpx.Response(500, json={"message": "db down"}), ServiceUnavailableError, "db down"),
        ],
    )
    @pytest.mark.asyncio
    async def test_error_mapping(
        self,
        response: httpx.Response,
        error_type: type[Exception],
        message: str,
    ) -> None:
        service = HttpRecordService(BASE_URL, client=_client(lambda _: response, []))

        with pytest.raises(error_type, match=message):
            await service.update(EntityType.EVENT, 1, {"title": "Walk"})

    @pytest.mark.asyncio
    async def test_timeout_is_service_unavailable(self) -> None:
        def _timeout(request: httpx.Request) -> httpx.Response:
            msg = "timed out"
            raise httpx.ReadTimeout(msg, request=request)

        service = HttpRecordService(BASE_URL, client=_client(_timeout, []))

        with pytest.raises(ServiceUnavailableError):
            await service.create(EntityType.WORKSHOP, {"title": "Compost"})

    @pytest.mark.asyncio
    async def test_delete_and_subscription_action(self) -> None:
        requests: list[httpx.Request] = []
        client = _client(
            lambda _: httpx.Response(200, json={"message": "Subscription cancelled"}),
            requests,
        )
        service = HttpRecordService(BASE_URL, client=client)

        await service.delete(EntityType.WORKSHOP, 9)
        body = await service.apply_subscription_action(8, SubscriptionAction.CANCEL)

        assert body == {"message": "Subscription cancelled"}
        assert (requests[0].method, requests[0].url.path) == ("DELETE", "/api/workshops/9")
        assert (requests[1].method, requests[1].url.path) == ("PUT", "/api/subscriptions/8/cancel")


class TestContainer:
    """Test DI container wiring."""

    def test_container_builds_http_adapters(self) -> None:
        from application.ports.image_store import ImageStore
        from application.ports.record_service import RecordService
        from application.sagas.image_upsert_saga import ImageUpsertSaga

        container = create_container(Settings(CATALOG_API_URL="http://catalog.test/"))

        store = container[ImageStore]
        records = container[RecordService]
        assert isinstance(store, HttpImageStore)
        assert isinstance(records, HttpRecordService)
        assert store.base_url == "http://catalog.test"
        assert isinstance(container[ImageUpsertSaga], ImageUpsertSaga)

    def test_get_container_is_cached(self) -> None:
        assert get_container() is get_container()
