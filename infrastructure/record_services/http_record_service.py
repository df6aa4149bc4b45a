from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx
import structlog

from application.dtos.record_dtos import EntityRecord
from application.ports.record_service import RecordService
from domain.exceptions import RecordNotFoundError, ServiceUnavailableError, ValidationError
from infrastructure.lib.catalog_http import CatalogHttpClient, error_message

if TYPE_CHECKING:
    from application.dtos.record_dtos import RecordId
    from domain.value_objects.entity_type import EntityType
    from domain.value_objects.subscription_status import SubscriptionAction

logger = structlog.get_logger()

_ENVELOPE_KEYS = frozenset({"message", "success"})


class HttpRecordService(CatalogHttpClient, RecordService):
    """RecordService adapter for the catalog REST API.

    The API is not uniform about what it returns: creates answer
    ``{"message", "<type>_id"}``, updates answer ``{"message"}`` and reads
    wrap the record under a singular key. Any 2xx is treated as committed
    and the record is rebuilt from the submitted payload plus whatever the
    server sent back.

    Updates replace every column, so a payload must carry the image field
    even when the image is unchanged.

    Profiles are an assumed contract: they are written with
    ``PUT /api/users/<id>`` carrying only ``profile_image``, a route expected to
    update just the columns it receives. The catalog host does not expose it
    today; it only offers the combined ``POST /api/upload/profile-image``,
    which stores and commits in one step and leaves nothing to compensate.
    """

    def __init__(
        self,
        base_url: str,
        *,
        token: str | None = None,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
        api_prefix: str = "/api",
    ) -> None:
        super().__init__(base_url, timeout=timeout, client=client)
        self.token = token
        self.api_prefix = api_prefix.rstrip("/")

    async def create(self, entity_type: EntityType, payload: dict[str, Any]) -> EntityRecord:
        body = await self._request("POST", f"/{entity_type.resource_path}", json=payload)
        return self._to_record(entity_type, body, payload)

    async def update(
        self,
        entity_type: EntityType,
        record_id: RecordId,
        payload: dict[str, Any],
    ) -> EntityRecord:
        body = await self._request(
            "PUT",
            f"/{entity_type.resource_path}/{record_id}",
            json=payload,
        )
        return self._to_record(entity_type, body, payload, record_id)

    async def get(self, entity_type: EntityType, record_id: RecordId) -> EntityRecord:
        body = await self._request("GET", f"/{entity_type.resource_path}/{record_id}")
        return self._to_record(entity_type, body, {}, record_id)

    async def delete(self, entity_type: EntityType, record_id: RecordId) -> None:
        await self._request("DELETE", f"/{entity_type.resource_path}/{record_id}")

    async def apply_subscription_action(
        self,
        subscription_id: RecordId,
        action: SubscriptionAction,
    ) -> dict[str, Any]:
        body = await self._request("PUT", f"/subscriptions/{subscription_id}/{action.value}")
        return body if isinstance(body, dict) else {}

    def _headers(self) -> dict[str, str]:
        if not self.token:
            return {}
        return {"Authorization": f"Bearer {self.token}"}

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json: dict[str, Any] | None = None,
    ) -> Any:  # noqa: ANN401
        url = self._url(f"{self.api_prefix}{path}")
        try:
            async with self._client() as client:
                response = await client.request(
                    method,
                    url,
                    json=json,
                    headers=self._headers(),
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            msg = f"Catalog API unreachable: {e!s}"
            raise ServiceUnavailableError(msg) from e

        if response.status_code == httpx.codes.NOT_FOUND:
            raise RecordNotFoundError(error_message(response, "Record not found"))
        if response.is_client_error:
            raise ValidationError(error_message(response, "Request rejected by the catalog API"))
        if response.is_error:
            detail = error_message(response, "Internal error")
            msg = f"Catalog API error ({response.status_code}): {detail}"
            raise ServiceUnavailableError(msg)

        logger.debug("catalog_request_ok", method=method, path=path, status=response.status_code)
        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError:
            return {}

    @staticmethod
    def _to_record(
        entity_type: EntityType,
        body: Any,  # noqa: ANN401
        payload: dict[str, Any],
        record_id: RecordId | None = None,
    ) -> EntityRecord:
        data = body if isinstance(body, dict) else {}
        wrapped = data.get(entity_type.wrapper_key)
        if isinstance(wrapped, dict):
            data = wrapped

        returned = {key: value for key, value in data.items() if key not in _ENVELOPE_KEYS}
        returned_id = returned.pop("id", None)
        if returned_id is None:
            returned_id = returned.get(entity_type.id_field)

        return EntityRecord(
            entity_type=entity_type,
            record_id=returned_id if returned_id is not None else record_id,
            fields={**payload, **returned},
        )
