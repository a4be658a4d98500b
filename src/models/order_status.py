"""Order lifecycle status values."""

from enum import Enum


class OrderStatus(str, Enum):
    """Closed set of order lifecycle states.

    Values are the canonical display strings. Cancelled and Closed are terminal.
    """

    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    RETURNED = "Returned"
    CANCELLED = "Cancelled"
    CLOSED = "Closed"

    @classmethod
    def parse(cls, value: str | None) -> "OrderStatus | None":
        """Resolve a status from external input, ignoring case.

        Args:
            value: Raw status name, e.g. "confirmed" or "SHIPPED".

        Returns:
            The matching OrderStatus, or None if the name is unknown.
        """
        if value is None:
            return None

        wanted = value.strip().casefold()
        for status in cls:
            if status.value.casefold() == wanted:
                return status
        return None

    @property
    def is_fulfilled(self) -> bool:
        """Check if reaching this status counts as fulfillment."""
        return self in (OrderStatus.DELIVERED, OrderStatus.CLOSED)

    def __str__(self) -> str:
        return self.value
