"""Promotion evaluation result schema."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class PromotionResult(BaseModel):
    """Immutable outcome of running the promotion engine against one order.

    ``applied_promotions`` keeps rule evaluation order and is not deduplicated.
    """

    model_config = ConfigDict(frozen=True)

    original_total: Decimal = Field(description="Order total before discounts")
    discounted_total: Decimal = Field(ge=0, description="Order total after all discounts")
    applied_promotions: tuple[str, ...] = Field(
        default=(), description="Names of the rules that produced a discount"
    )

    @property
    def total_discount(self) -> Decimal:
        """Amount removed from the original total."""
        return self.original_total - self.discounted_total
