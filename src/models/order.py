"""Order entity and its lifecycle mutations."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import TYPE_CHECKING
from uuid import UUID

from src.models.order_status import OrderStatus

if TYPE_CHECKING:
    from src.schemas.promotion import PromotionResult
    from src.services.status_transitions import StatusTransitionMatrix


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _to_decimal(value: Decimal | int | float | str) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


class InvalidStatusTransitionError(Exception):
    """Raised when an order is moved along an edge the matrix does not allow.

    Only trusted internal callers use ``Order.change_status`` directly, so this
    signals a programming error rather than bad user input.
    """

    def __init__(self, current: OrderStatus, requested: OrderStatus) -> None:
        self.current = current
        self.requested = requested
        super().__init__(f"Cannot transition order from {current} to {requested}")


@dataclass
class Order:
    """A customer purchase with a monetary total and a lifecycle status.

    ``total_amount`` is fixed at creation. ``discounted_total`` starts equal to
    it and only changes through ``apply_discount``.
    """

    id: UUID
    customer_id: UUID
    total_amount: Decimal
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=utc_now)
    fulfilled_at: datetime | None = None
    discounted_total: Decimal | None = None
    applied_promotions: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.total_amount = _to_decimal(self.total_amount)
        if self.total_amount < 0:
            raise ValueError("total_amount must be >= 0")
        if self.discounted_total is None:
            self.discounted_total = self.total_amount
        else:
            self.discounted_total = _to_decimal(self.discounted_total)

        # Naive timestamps are taken as UTC
        self.created_at = _as_utc(self.created_at)
        if self.fulfilled_at is not None:
            self.fulfilled_at = _as_utc(self.fulfilled_at)

    def change_status(self, new_status: OrderStatus, matrix: "StatusTransitionMatrix") -> None:
        """Move the order to ``new_status``.

        Entering Delivered or Closed stamps ``fulfilled_at`` with the current
        time, including a re-entry after a return.

        Args:
            new_status: Target status.
            matrix: Transition rules to validate against.

        Raises:
            InvalidStatusTransitionError: If the matrix rejects the move.
        """
        if not matrix.can_transition(self.status, new_status):
            raise InvalidStatusTransitionError(self.status, new_status)

        self.status = new_status

        if new_status.is_fulfilled:
            self.fulfilled_at = utc_now()

    def apply_discount(self, result: "PromotionResult | None") -> None:
        """Overwrite the discount state from a promotion result. ``None`` is a no-op."""
        if result is None:
            return

        self.discounted_total = result.discounted_total
        self.applied_promotions = list(result.applied_promotions)

    @property
    def discount_amount(self) -> Decimal:
        """Amount taken off the original total."""
        return self.total_amount - self.discounted_total
