"""Customer profile value types."""

from decimal import Decimal
from enum import Enum
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class CustomerSegment(str, Enum):
    """Coarse customer classification driving promotion eligibility."""

    NEW = "New"
    REGULAR = "Regular"
    VIP = "VIP"


class CustomerProfile(BaseModel):
    """Immutable snapshot of a customer's purchase history.

    Profiles are never edited in place; use ``model_copy(update=...)`` to
    build the replacement value.
    """

    model_config = ConfigDict(frozen=True)

    customer_id: UUID = Field(description="Customer identifier")
    segment: CustomerSegment = Field(description="Customer segment")
    past_order_count: int = Field(default=0, ge=0, description="Number of previous orders")
    total_order_value: Decimal = Field(default=Decimal("0"), ge=0, description="Lifetime order value")
