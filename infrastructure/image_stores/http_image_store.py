from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import structlog

from application.ports.image_store import ImageStore, StoredImage
from domain.exceptions import StorageUnavailableError
from domain.value_objects.image_category import is_default_image
from infrastructure.lib.catalog_http import CatalogHttpClient, error_message

if TYPE_CHECKING:
    from domain.value_objects.pending_upload import PendingUpload

logger = structlog.get_logger()


class HttpImageStore(CatalogHttpClient, ImageStore):
    """ImageStore adapter for the catalog host's upload endpoint.

    ``POST /api/upload?type=<category>`` takes a multipart ``image`` field and
    answers ``{"imageUrl": ...}``. ``DELETE /api/upload?imageUrl=<ref>`` is
    idempotent on the server side. The endpoint's ``oldImage`` hint is never
    sent: a superseded image is removed by the caller once the record commit
    has succeeded.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
        upload_path: str = "/api/upload",
    ) -> None:
        super().__init__(base_url, timeout=timeout, client=client)
        self.upload_path = upload_path

    async def store(self, upload: PendingUpload) -> StoredImage:
        params = {"type": upload.category.value}
        files = {
            "image": (
                upload.filename or "upload",
                upload.content,
                upload.mime_type or "application/octet-stream",
            ),
        }

        try:
            async with self._client() as client:
                response = await client.post(
                    self._url(self.upload_path),
                    params=params,
                    files=files,
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            msg = f"Image host unreachable: {e!s}"
            raise StorageUnavailableError(msg) from e

        if response.is_error:
            detail = error_message(response, "Upload failed")
            msg = f"Image upload rejected ({response.status_code}): {detail}"
            raise StorageUnavailableError(msg)

        try:
            body = response.json()
        except ValueError as e:
            msg = "Image host returned a non-JSON upload response"
            raise StorageUnavailableError(msg) from e

        image_url = body.get("imageUrl") if isinstance(body, dict) else None
        if not image_url:
            logger.warning(
                "image_upload_response_without_url",
                category=upload.category.value,
                status_code=response.status_code,
            )
            msg = "Image host response is missing imageUrl"
            raise StorageUnavailableError(msg)

        logger.debug(
            "image_uploaded",
            category=upload.category.value,
            image_ref=image_url,
            size_bytes=upload.size_bytes,
        )
        return StoredImage(url=image_url, category=upload.category)

    async def remove(self, ref: str) -> None:
        if is_default_image(ref):
            logger.debug("image_remove_skipped_placeholder", image_ref=ref)
            return

        try:
            async with self._client() as client:
                response = await client.delete(
                    self._url(self.upload_path),
                    params={"imageUrl": ref},
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            msg = f"Image host unreachable: {e!s}"
            raise StorageUnavailableError(msg) from e

        if response.status_code == httpx.codes.NOT_FOUND:
            logger.debug("image_already_removed", image_ref=ref)
            return
        if response.is_error:
            detail = error_message(response, "Delete failed")
            msg = f"Image removal rejected ({response.status_code}): {detail}"
            raise StorageUnavailableError(msg)
