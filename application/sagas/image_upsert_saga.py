from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from returns.result import Failure, Success

from application.dtos.errors import UpsertFailure
from application.sagas.upsert_states import (
    CommittedClean,
    Committing,
    CompensatingRollback,
    Failed,
    NoImageChange,
    Uploading,
)
from domain.exceptions import (
    CompensationFailedError,
    RecordNotFoundError,
    ServiceUnavailableError,
    StorageUnavailableError,
    ValidationError,
)
from domain.value_objects.image_category import is_default_image

if TYPE_CHECKING:
    from application.dtos.record_dtos import UpsertCommand, UpsertOutcome
    from application.ports.image_store import ImageStore
    from application.ports.record_service import RecordService
    from application.sagas.upsert_states import TerminalState, UpsertState

logger = structlog.get_logger()


class ImageUpsertSaga:
    """Orchestrates image upload → record commit with compensating cleanup.

    The record commit decides success. A newly stored image is removed when
    the commit fails, and a superseded image is removed only after the new
    record state is committed. Cleanup failures are logged, never returned.
    """

    def __init__(self, image_store: ImageStore, record_service: RecordService) -> None:
        """Initialize saga with the two upstream clients.

        Args:
            image_store: Client for the image hosting backend
            record_service: Client for the catalog record API

        """
        self.image_store = image_store
        self.record_service = record_service

    async def execute(self, command: UpsertCommand) -> UpsertOutcome:
        try:
            prior_ref = await self._prior_ref(command)
        except (ValidationError, RecordNotFoundError, ServiceUnavailableError) as e:
            error = self._error_for(command, e)
            logger.warning(
                "prior_image_lookup_failed",
                entity_type=command.entity_type.value,
                record_id=command.record_id,
                category=error.category,
                error=error.message,
            )
            return Failure(error)

        state: UpsertState = self._initial_state(command, prior_ref)
        while not isinstance(state, CommittedClean | Failed):
            state = await self._advance(state, command)
        return await self._finish(state, command)

    async def _prior_ref(self, command: UpsertCommand) -> str | None:
        """Image the record holds before this edit. None on create.

        The catalog API replaces every column on update, so an edit that
        carries no image reference reads the stored one first.
        """
        if not command.is_update:
            return None
        if command.current_image is not None:
            return command.current_image
        field = command.entity_type.image_field
        if field in command.payload:
            return command.payload[field]

        record = await self.record_service.get(command.entity_type, command.record_id)
        logger.debug(
            "prior_image_looked_up",
            entity_type=command.entity_type.value,
            record_id=command.record_id,
            image_ref=record.image,
        )
        return record.image

    def _initial_state(
        self,
        command: UpsertCommand,
        prior_ref: str | None,
    ) -> NoImageChange | Uploading:
        field = command.entity_type.image_field
        payload = dict(command.payload)

        default_image = command.entity_type.image_category.default_image
        if command.is_update:
            if field not in payload:
                payload[field] = prior_ref or default_image
        elif not payload.get(field):
            payload[field] = default_image

        if command.upload is None:
            return NoImageChange(payload=payload)
        return Uploading(payload=payload, upload=command.upload, prior_ref=prior_ref)

    async def _advance(self, state: UpsertState, command: UpsertCommand) -> UpsertState:
        if isinstance(state, NoImageChange):
            return Committing(payload=state.payload)
        if isinstance(state, Uploading):
            return await self._upload(state, command)
        if isinstance(state, Committing):
            return await self._commit(state, command)
        if isinstance(state, CompensatingRollback):
            await self._rollback(state, command)
            return Failed(error=state.error)
        msg = f"Unexpected upsert state: {type(state).__name__}"
        raise TypeError(msg)

    async def _upload(self, state: Uploading, command: UpsertCommand) -> Committing | Failed:
        try:
            stored = await self.image_store.store(state.upload)
        except StorageUnavailableError as e:
            logger.warning(
                "image_upload_failed",
                entity_type=command.entity_type.value,
                category=state.upload.category.value,
                error=str(e),
            )
            return Failed(error=self._failure(command, "storage_unavailable", str(e)))

        logger.info(
            "image_stored",
            entity_type=command.entity_type.value,
            image_ref=stored.url,
        )
        payload = {**state.payload, command.entity_type.image_field: stored.url}
        return Committing(payload=payload, pending_ref=stored.url, prior_ref=state.prior_ref)

    async def _commit(
        self,
        state: Committing,
        command: UpsertCommand,
    ) -> CommittedClean | CompensatingRollback | Failed:
        try:
            if command.record_id is None:
                record = await self.record_service.create(command.entity_type, state.payload)
            else:
                record = await self.record_service.update(
                    command.entity_type,
                    command.record_id,
                    state.payload,
                )
        except (ValidationError, RecordNotFoundError, ServiceUnavailableError) as e:
            error = self._error_for(command, e)
        else:
            superseded = state.prior_ref if self._is_superseded(state) else None
            return CommittedClean(record=record, superseded_ref=superseded)

        logger.warning(
            "record_commit_failed",
            entity_type=command.entity_type.value,
            record_id=command.record_id,
            category=error.category,
            error=error.message,
        )
        if state.pending_ref is None:
            return Failed(error=error)
        return CompensatingRollback(
            pending_ref=state.pending_ref,
            error=error,
            prior_ref=state.prior_ref,
        )

    async def _rollback(self, state: CompensatingRollback, command: UpsertCommand) -> None:
        try:
            await self._remove(state.pending_ref, command, other_ref=state.prior_ref)
        except CompensationFailedError as e:
            logger.exception("orphaned_image_not_removed", **e.context)
        else:
            logger.info(
                "orphaned_image_removed",
                entity_type=command.entity_type.value,
                image_ref=state.pending_ref,
            )

    async def _finish(self, state: TerminalState, command: UpsertCommand) -> UpsertOutcome:
        if isinstance(state, Failed):
            return Failure(state.error)

        if state.superseded_ref is not None:
            try:
                await self._remove(state.superseded_ref, command, other_ref=state.record.image)
            except CompensationFailedError as e:
                logger.exception("superseded_image_not_removed", **e.context)
            else:
                logger.info(
                    "superseded_image_removed",
                    entity_type=command.entity_type.value,
                    image_ref=state.superseded_ref,
                )

        logger.info(
            "upsert_committed",
            entity_type=command.entity_type.value,
            record_id=state.record.record_id,
        )
        return Success(state.record)

    async def _remove(self, ref: str, command: UpsertCommand, *, other_ref: str | None) -> None:
        try:
            await self.image_store.remove(ref)
        except StorageUnavailableError as e:
            raise CompensationFailedError(
                command.entity_type,
                ref,
                other_ref,
                reason=str(e),
            ) from e

    @staticmethod
    def _is_superseded(state: Committing) -> bool:
        return (
            state.pending_ref is not None
            and state.prior_ref is not None
            and state.prior_ref != state.pending_ref
            and not is_default_image(state.prior_ref)
        )

    @staticmethod
    def _failure(command: UpsertCommand, category: str, message: str) -> UpsertFailure:
        display_name = command.display_name or command.entity_type.label
        return UpsertFailure(category, message, display_name)

    @classmethod
    def _error_for(cls, command: UpsertCommand, exc: Exception) -> UpsertFailure:
        if isinstance(exc, ValidationError):
            return cls._failure(command, "validation", str(exc))
        if isinstance(exc, RecordNotFoundError):
            return cls._failure(command, "not_found", str(exc))
        return cls._failure(command, "service_unavailable", str(exc))
