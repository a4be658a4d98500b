"""Demo data for local development.

Seeds three open headline orders, one per promotion scenario, on top of an
older order history. Only the history counts toward a customer's
``past_order_count``, so the New customer still qualifies for a first-order
discount.
"""

import logging
import random
from datetime import datetime, timedelta
from decimal import Decimal
from uuid import UUID, uuid4

from src.models.customer import CustomerProfile, CustomerSegment
from src.models.order import Order, utc_now
from src.services.order_store import OrderStore
from src.services.profile_service import InMemoryCustomerProfileService

logger = logging.getLogger(__name__)

VIP_CUSTOMER_ID = UUID("11111111-1111-1111-1111-111111111111")
NEW_CUSTOMER_ID = UUID("22222222-2222-2222-2222-222222222222")
REGULAR_CUSTOMER_ID = UUID("33333333-3333-3333-3333-333333333333")

DEMO_PROFILES: tuple[CustomerProfile, ...] = (
    CustomerProfile(
        customer_id=VIP_CUSTOMER_ID,
        segment=CustomerSegment.VIP,
        past_order_count=12,
        total_order_value=Decimal("750.00"),
    ),
    CustomerProfile(
        customer_id=NEW_CUSTOMER_ID,
        segment=CustomerSegment.NEW,
        past_order_count=0,
        total_order_value=Decimal("0.00"),
    ),
    CustomerProfile(
        customer_id=REGULAR_CUSTOMER_ID,
        segment=CustomerSegment.REGULAR,
        past_order_count=3,
        total_order_value=Decimal("240.00"),
    ),
)

# Customers the history orders rotate through
_ROTATION = (VIP_CUSTOMER_ID, REGULAR_CUSTOMER_ID)
FILLER_ORDER_COUNT = 10


async def seed_demo_data(
    order_store: OrderStore,
    profile_service: InMemoryCustomerProfileService,
    now: datetime | None = None,
    rng: random.Random | None = None,
) -> list[Order]:
    """Populate the store with demo profiles and orders.

    Args:
        order_store: Store to add orders to.
        profile_service: Profile lookup to register demo customers with.
        now: Reference time for order creation dates.
        rng: Random source for filler order amounts.

    Returns:
        list[Order]: The seeded orders, oldest last.
    """
    now = now or utc_now()
    rng = rng or random.Random()

    for profile in DEMO_PROFILES:
        profile_service.add(profile)

    plan: list[tuple[UUID, Decimal, int, bool]] = [
        (NEW_CUSTOMER_ID, Decimal("100"), 1, False),  # first order
        (REGULAR_CUSTOMER_ID, Decimal("600"), 2, False),  # high value
        (VIP_CUSTOMER_ID, Decimal("200"), 3, False),  # VIP
    ]
    for i in range(FILLER_ORDER_COUNT):
        amount = Decimal(str(round(rng.uniform(20, 420), 2)))
        plan.append((_ROTATION[i % len(_ROTATION)], amount, 4 + i, True))

    orders: list[Order] = []
    for customer_id, amount, days_ago, is_history in plan:
        order = Order(
            id=uuid4(),
            customer_id=customer_id,
            total_amount=amount,
            created_at=now - timedelta(days=days_ago),
        )
        await order_store.add(order)
        if is_history:
            await _record_past_order(profile_service, customer_id)
        orders.append(order)

    logger.info("Seeded %d demo profiles and %d demo orders", len(DEMO_PROFILES), len(orders))
    return orders


async def _record_past_order(profile_service: InMemoryCustomerProfileService, customer_id: UUID) -> None:
    profile = await profile_service.get_profile(customer_id)
    if profile is None:
        return
    profile_service.add(profile.model_copy(update={"past_order_count": profile.past_order_count + 1}))
