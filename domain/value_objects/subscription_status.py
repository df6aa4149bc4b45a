from enum import Enum


class SubscriptionStatus(str, Enum):
    """Lifecycle state of a customer subscription."""

    ACTIVE = "active"
    PAUSED = "paused"
    CANCELLED = "cancelled"


class SubscriptionAction(str, Enum):
    """Admin or customer action that moves a subscription between states."""

    CANCEL = "cancel"
    PAUSE = "pause"
    RESUME = "resume"
    REACTIVATE = "reactivate"

    @property
    def target_status(self) -> SubscriptionStatus:
        if self is SubscriptionAction.CANCEL:
            return SubscriptionStatus.CANCELLED
        if self is SubscriptionAction.PAUSE:
            return SubscriptionStatus.PAUSED
        return SubscriptionStatus.ACTIVE

    def allowed_from(self, status: SubscriptionStatus) -> bool:
        return status in _ALLOWED_FROM[self]


_ALLOWED_FROM: dict[SubscriptionAction, frozenset[SubscriptionStatus]] = {
    SubscriptionAction.CANCEL: frozenset({SubscriptionStatus.ACTIVE, SubscriptionStatus.PAUSED}),
    SubscriptionAction.PAUSE: frozenset({SubscriptionStatus.ACTIVE}),
    SubscriptionAction.RESUME: frozenset({SubscriptionStatus.PAUSED}),
    SubscriptionAction.REACTIVATE: frozenset({SubscriptionStatus.CANCELLED}),
}
