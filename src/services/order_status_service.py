"""Order status advancement service."""

import logging
from enum import Enum
from uuid import UUID

from src.models.order_status import OrderStatus
from src.services.order_store import OrderStore
from src.services.status_transitions import StatusTransitionMatrix

logger = logging.getLogger(__name__)


class StatusAdvanceOutcome(str, Enum):
    """Why a status advance succeeded or was rejected."""

    OK = "ok"
    NOT_FOUND = "not_found"
    INVALID_STATUS = "invalid_status"
    INVALID_TRANSITION = "invalid_transition"


class OrderStatusService:
    """Service for moving a single order through its lifecycle.

    The read-validate-write sequence relies on the store serializing updates
    per order id.
    """

    def __init__(
        self,
        order_store: OrderStore,
        matrix: StatusTransitionMatrix | None = None,
    ) -> None:
        """Initialize the status service.

        Args:
            order_store: Store holding the orders.
            matrix: Optional transition matrix for testing.
        """
        self.order_store = order_store
        self.matrix = matrix or StatusTransitionMatrix()

    async def advance_status_outcome(self, order_id: UUID, new_status: str) -> StatusAdvanceOutcome:
        """Advance an order and report exactly why it did or did not move.

        Args:
            order_id: The order's UUID.
            new_status: Target status name, matched case-insensitively.

        Returns:
            StatusAdvanceOutcome: OK when the order was updated and persisted.
        """
        order = await self.order_store.get(order_id)
        if order is None:
            logger.warning("Status advance rejected: order %s not found", order_id)
            return StatusAdvanceOutcome.NOT_FOUND

        target = OrderStatus.parse(new_status)
        if target is None:
            logger.warning("Status advance rejected: unknown status '%s' for order %s", new_status, order_id)
            return StatusAdvanceOutcome.INVALID_STATUS

        if not self.matrix.can_transition(order.status, target):
            logger.warning(
                "Status advance rejected: %s -> %s not allowed for order %s",
                order.status,
                target,
                order_id,
            )
            return StatusAdvanceOutcome.INVALID_TRANSITION

        previous = order.status
        order.change_status(target, self.matrix)
        await self.order_store.update(order)

        logger.info("Order %s moved from %s to %s", order_id, previous, target)
        return StatusAdvanceOutcome.OK

    async def advance_status(self, order_id: UUID, new_status: str) -> bool:
        """Advance an order to ``new_status``.

        Fails closed: a missing order, an unknown status name and a disallowed
        transition all return False without raising. Use
        ``advance_status_outcome`` to tell them apart.

        Args:
            order_id: The order's UUID.
            new_status: Target status name, matched case-insensitively.

        Returns:
            bool: True if the order was updated and persisted.
        """
        outcome = await self.advance_status_outcome(order_id, new_status)
        return outcome is StatusAdvanceOutcome.OK
