"""Domain exceptions for business rule violations and upstream failures."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from domain.value_objects.entity_type import EntityType


class DomainError(Exception):
    """Base exception for domain layer."""


class ValidationError(DomainError):
    """Raised when a payload is rejected by business rules.

    The message is shown to the admin verbatim.
    """


class RecordNotFoundError(DomainError):
    """Raised when the record targeted by an edit no longer exists."""


class InfrastructureError(DomainError):
    """Raised when infrastructure operations fail (network, backend, etc.)."""


class StorageUnavailableError(InfrastructureError):
    """Raised when the image host cannot store or remove an image."""


class ServiceUnavailableError(InfrastructureError):
    """Raised when the catalog record API cannot be reached or errors out."""


class CompensationFailedError(InfrastructureError):
    """Raised when a cleanup removal fails and an image is left orphaned.

    Never surfaced to the admin. Carries enough context for manual cleanup.
    """

    def __init__(
        self,
        entity_type: EntityType,
        orphaned_ref: str,
        other_ref: str | None = None,
        *,
        reason: str = "",
    ) -> None:
        self.entity_type = entity_type
        self.orphaned_ref = orphaned_ref
        self.other_ref = other_ref
        self.reason = reason
        super().__init__(f"Could not remove {orphaned_ref} for {entity_type.value}: {reason}")

    @property
    def context(self) -> dict[str, str | None]:
        return {
            "entity_type": self.entity_type.value,
            "orphaned_ref": self.orphaned_ref,
            "other_ref": self.other_ref,
            "reason": self.reason,
        }
