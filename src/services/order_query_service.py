"""Read-side order listing."""

import logging

from src.schemas.order import OrderResponse
from src.services.order_store import OrderStore
from src.services.profile_service import CustomerProfileService
from src.services.promotion_engine import PromotionEngine

logger = logging.getLogger(__name__)


class OrderQueryService:
    """Lists orders together with the promotions they currently qualify for."""

    def __init__(
        self,
        order_store: OrderStore,
        profile_service: CustomerProfileService,
        engine: PromotionEngine,
    ) -> None:
        self.order_store = order_store
        self.profile_service = profile_service
        self.engine = engine

    async def list_orders(self) -> list[OrderResponse]:
        """Get every order with its applied and potential promotions.

        Potential promotions are evaluated fresh and never written back.
        Orders whose customer has no profile get an empty list.

        Returns:
            list[OrderResponse]: One entry per stored order.
        """
        orders = await self.order_store.get_all()
        profiles = await self.profile_service.get_profiles({order.customer_id for order in orders})

        items: list[OrderResponse] = []
        for order in orders:
            potential: list[str] = []
            profile = profiles.get(order.customer_id)
            if profile is not None:
                potential = list(self.engine.apply_discounts(order, profile).applied_promotions)

            item = OrderResponse.model_validate(order)
            items.append(item.model_copy(update={"potential_promotions": potential}))

        logger.debug("Listed %d orders", len(items))
        return items
