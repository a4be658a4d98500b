"""Order analytics summary schema."""

from pydantic import BaseModel, ConfigDict, Field


class OrderAnalytics(BaseModel):
    """Immutable snapshot of metrics derived from the whole order set."""

    model_config = ConfigDict(frozen=True)

    average_order_value: float = Field(default=0.0, description="Mean order total, 2 decimals")
    average_fulfillment_time_hours: float = Field(
        default=0.0, description="Mean hours from creation to fulfillment, whole hours"
    )
    average_daily_orders: float = Field(default=0.0, description="Orders per covered day, 2 decimals")
    total_orders_last_seven_days: int = Field(
        default=0, description="Orders created in the trailing 7 days, today included"
    )
    report_days_covered: int = Field(
        default=0, description="Days between first and last order date, both inclusive"
    )
    average_discount: float = Field(default=0.0, description="Mean discount per order, 2 decimals")
