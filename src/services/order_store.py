"""Order storage contract and the in-memory implementation."""

import copy
import logging
from threading import Lock
from typing import Protocol
from uuid import UUID

from src.models.order import Order

logger = logging.getLogger(__name__)


class OrderStore(Protocol):
    """Async order storage.

    Implementations must make ``update`` an atomic per-order write.
    """

    async def get(self, order_id: UUID) -> Order | None: ...

    async def get_all(self) -> list[Order]: ...

    async def update(self, order: Order) -> None: ...

    async def get_by_customer(self, customer_id: UUID) -> list[Order]: ...

    async def add(self, order: Order) -> None: ...


class InMemoryOrderStore:
    """Thread-safe dict-backed order store.

    Orders are copied in and out, so a fetched order only changes the stored
    state once it is passed back to ``update``.
    """

    def __init__(self) -> None:
        self._orders: dict[UUID, Order] = {}
        self._lock = Lock()

    async def get(self, order_id: UUID) -> Order | None:
        """Get an order by ID.

        Args:
            order_id: The order's UUID.

        Returns:
            A copy of the stored order, or None if not found.
        """
        with self._lock:
            order = self._orders.get(order_id)
            return copy.deepcopy(order) if order is not None else None

    async def get_all(self) -> list[Order]:
        """Snapshot of every stored order."""
        with self._lock:
            return [copy.deepcopy(order) for order in self._orders.values()]

    async def get_by_customer(self, customer_id: UUID) -> list[Order]:
        """Get all orders placed by a customer."""
        with self._lock:
            return [
                copy.deepcopy(order)
                for order in self._orders.values()
                if order.customer_id == customer_id
            ]

    async def add(self, order: Order) -> None:
        """Insert or replace an order."""
        with self._lock:
            self._orders[order.id] = copy.deepcopy(order)
        logger.debug("Stored order %s", order.id)

    async def update(self, order: Order) -> None:
        """Replace the stored copy of an order."""
        with self._lock:
            self._orders[order.id] = copy.deepcopy(order)
        logger.debug("Updated order %s (status=%s)", order.id, order.status)

    def count(self) -> int:
        """Number of stored orders."""
        with self._lock:
            return len(self._orders)
