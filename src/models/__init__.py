"""Domain model type definitions."""

from src.models.customer import CustomerProfile, CustomerSegment
from src.models.order import InvalidStatusTransitionError, Order
from src.models.order_status import OrderStatus

__all__ = [
    "CustomerProfile",
    "CustomerSegment",
    "InvalidStatusTransitionError",
    "Order",
    "OrderStatus",
]
