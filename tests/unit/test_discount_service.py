"""Unit tests for DiscountService."""

from decimal import Decimal
from uuid import UUID, uuid4

import pytest

from src.models.customer import CustomerSegment
from src.services.discount_service import DiscountService
from src.services.order_store import InMemoryOrderStore
from src.services.profile_service import InMemoryCustomerProfileService
from src.services.promotion_engine import PromotionEngine
from src.services.promotion_rules import build_promotion_rules
from tests.factories import make_order, make_profile


@pytest.fixture
def store() -> InMemoryOrderStore:
    return InMemoryOrderStore()


@pytest.fixture
def profiles() -> InMemoryCustomerProfileService:
    return InMemoryCustomerProfileService(
        [make_profile(CustomerSegment.VIP, past_order_count=12, total_order_value="750")]
    )


@pytest.fixture
def discount_service(
    store: InMemoryOrderStore, profiles: InMemoryCustomerProfileService
) -> DiscountService:
    return DiscountService(store, profiles, PromotionEngine(build_promotion_rules()))


class TestApplyPromotions:
    """Tests for apply_promotions."""

    def test_evaluates_without_mutating(self, discount_service: DiscountService) -> None:
        order = make_order("200")
        profile = make_profile(CustomerSegment.VIP, total_order_value="750")

        result = discount_service.apply_promotions(order, profile)

        assert result.applied_promotions == ("Loyalty Discount", "VIP Discount")
        assert result.discounted_total == Decimal("150")
        assert order.discounted_total == Decimal("200")


class TestApplyToOrder:
    """Tests for apply_to_order."""

    @pytest.mark.asyncio
    async def test_applies_and_persists_discount(
        self, discount_service: DiscountService, store: InMemoryOrderStore
    ) -> None:
        order = make_order("200")
        await store.add(order)

        result = await discount_service.apply_to_order(order.id)

        assert result is not None
        assert result.discounted_total == Decimal("150")

        stored = await store.get(order.id)
        assert stored.discounted_total == Decimal("150")
        assert stored.applied_promotions == ["Loyalty Discount", "VIP Discount"]
        assert stored.total_amount == Decimal("200")

    @pytest.mark.asyncio
    async def test_reapplying_is_idempotent(
        self, discount_service: DiscountService, store: InMemoryOrderStore
    ) -> None:
        """Test that discounts are always computed from the original total."""
        order = make_order("200")
        await store.add(order)

        await discount_service.apply_to_order(order.id)
        result = await discount_service.apply_to_order(order.id)

        assert result.discounted_total == Decimal("150")
        assert (await store.get(order.id)).applied_promotions == ["Loyalty Discount", "VIP Discount"]

    @pytest.mark.asyncio
    async def test_missing_order_returns_none(self, discount_service: DiscountService) -> None:
        assert await discount_service.apply_to_order(uuid4()) is None

    @pytest.mark.asyncio
    async def test_missing_profile_returns_none(
        self, discount_service: DiscountService, store: InMemoryOrderStore
    ) -> None:
        order = make_order("200", customer_id=UUID("99999999-9999-9999-9999-999999999999"))
        await store.add(order)

        assert await discount_service.apply_to_order(order.id) is None
        assert (await store.get(order.id)).discounted_total == Decimal("200")
