"""Order Pydantic schemas for API responses."""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.models.order_status import OrderStatus


class OrderResponse(BaseModel):
    """Schema for order API responses."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID = Field(description="Order unique identifier")
    customer_id: UUID = Field(description="Owning customer")
    total_amount: Decimal = Field(description="Original order total")
    status: OrderStatus = Field(description="Current lifecycle status")
    created_at: datetime = Field(description="Creation timestamp")
    fulfilled_at: datetime | None = Field(default=None, description="First fulfillment timestamp")
    discounted_total: Decimal = Field(description="Total after applied promotions")
    applied_promotions: list[str] = Field(default_factory=list, description="Promotions applied to the order")
    potential_promotions: list[str] = Field(
        default_factory=list, description="Promotions the order currently qualifies for"
    )


class OrderListResponse(BaseModel):
    """Schema for order list API responses."""

    model_config = ConfigDict(from_attributes=True)

    items: list[OrderResponse] = Field(description="List of orders")
