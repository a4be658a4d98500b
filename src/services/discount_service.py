"""Applying promotions to stored orders."""

import logging
from uuid import UUID

from src.models.customer import CustomerProfile
from src.models.order import Order
from src.schemas.promotion import PromotionResult
from src.services.order_store import OrderStore
from src.services.profile_service import CustomerProfileService
from src.services.promotion_engine import PromotionEngine

logger = logging.getLogger(__name__)


class DiscountService:
    """Service for evaluating and persisting order promotions."""

    def __init__(
        self,
        order_store: OrderStore,
        profile_service: CustomerProfileService,
        engine: PromotionEngine,
    ) -> None:
        self.order_store = order_store
        self.profile_service = profile_service
        self.engine = engine

    def apply_promotions(self, order: Order, profile: CustomerProfile) -> PromotionResult:
        """Evaluate promotions for an order without changing it."""
        return self.engine.apply_discounts(order, profile)

    async def apply_to_order(self, order_id: UUID) -> PromotionResult | None:
        """Evaluate promotions for a stored order and persist the discount.

        Args:
            order_id: The order's UUID.

        Returns:
            PromotionResult, or None if the order or its customer's profile
            does not exist.
        """
        order = await self.order_store.get(order_id)
        if order is None:
            logger.warning("Cannot apply discount: order %s not found", order_id)
            return None

        profile = await self.profile_service.get_profile(order.customer_id)
        if profile is None:
            logger.warning(
                "Cannot apply discount: no profile for customer %s (order %s)",
                order.customer_id,
                order_id,
            )
            return None

        result = self.apply_promotions(order, profile)
        order.apply_discount(result)
        await self.order_store.update(order)

        logger.info(
            "Applied %d promotion(s) to order %s: %s -> %s (saved %s)",
            len(result.applied_promotions),
            order_id,
            result.original_total,
            result.discounted_total,
            result.total_discount,
        )
        return result
