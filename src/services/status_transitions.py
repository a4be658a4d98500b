"""Legal single-hop order status transitions."""

from types import MappingProxyType

from src.models.order_status import OrderStatus

ALLOWED_TRANSITIONS: MappingProxyType[OrderStatus, frozenset[OrderStatus]] = MappingProxyType(
    {
        OrderStatus.PENDING: frozenset({OrderStatus.CONFIRMED, OrderStatus.CANCELLED}),
        OrderStatus.CONFIRMED: frozenset({OrderStatus.SHIPPED, OrderStatus.CANCELLED}),
        OrderStatus.SHIPPED: frozenset({OrderStatus.DELIVERED, OrderStatus.RETURNED}),
        OrderStatus.DELIVERED: frozenset({OrderStatus.CLOSED, OrderStatus.RETURNED}),
        OrderStatus.RETURNED: frozenset({OrderStatus.CLOSED}),
        OrderStatus.CANCELLED: frozenset(),  # terminal
        OrderStatus.CLOSED: frozenset(),  # terminal
    }
)


class StatusTransitionMatrix:
    """Fixed adjacency table of order status changes.

    Only direct edges are legal; there is no path-finding.
    """

    def __init__(
        self,
        transitions: "MappingProxyType[OrderStatus, frozenset[OrderStatus]] | None" = None,
    ) -> None:
        self._transitions = transitions if transitions is not None else ALLOWED_TRANSITIONS

    def can_transition(self, from_status: OrderStatus, to_status: OrderStatus) -> bool:
        """Check whether ``from_status`` may move directly to ``to_status``."""
        allowed = self._transitions.get(from_status)
        return allowed is not None and to_status in allowed
