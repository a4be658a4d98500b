"""Unit tests for OrderStatusService."""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from src.models.order_status import OrderStatus
from src.services.order_status_service import OrderStatusService, StatusAdvanceOutcome
from src.services.order_store import InMemoryOrderStore
from tests.factories import make_order


@pytest.fixture
def store() -> InMemoryOrderStore:
    return InMemoryOrderStore()


@pytest.fixture
def status_service(store: InMemoryOrderStore) -> OrderStatusService:
    return OrderStatusService(store)


class TestAdvanceStatus:
    """Tests for advance_status."""

    @pytest.mark.asyncio
    async def test_valid_transition_updates_status(
        self, status_service: OrderStatusService, store: InMemoryOrderStore
    ) -> None:
        """Test that a legal move is persisted and reported as True."""
        order = make_order()
        await store.add(order)

        result = await status_service.advance_status(order.id, "Confirmed")

        assert result is True
        assert (await store.get(order.id)).status is OrderStatus.CONFIRMED

    @pytest.mark.asyncio
    async def test_status_name_is_case_insensitive(
        self, status_service: OrderStatusService, store: InMemoryOrderStore
    ) -> None:
        order = make_order()
        await store.add(order)

        assert await status_service.advance_status(order.id, "CONFIRMED") is True
        assert await status_service.advance_status(order.id, "shipped") is True
        assert (await store.get(order.id)).status is OrderStatus.SHIPPED

    @pytest.mark.asyncio
    async def test_missing_order_returns_false(self, status_service: OrderStatusService) -> None:
        assert await status_service.advance_status(uuid4(), "Confirmed") is False

    @pytest.mark.asyncio
    async def test_invalid_status_returns_false(
        self, status_service: OrderStatusService, store: InMemoryOrderStore
    ) -> None:
        order = make_order()
        await store.add(order)

        assert await status_service.advance_status(order.id, "InvalidStatus") is False
        assert (await store.get(order.id)).status is OrderStatus.PENDING

    @pytest.mark.asyncio
    async def test_disallowed_transition_returns_false(
        self, status_service: OrderStatusService, store: InMemoryOrderStore
    ) -> None:
        order = make_order()
        await store.add(order)

        assert await status_service.advance_status(order.id, "Delivered") is False
        assert (await store.get(order.id)).status is OrderStatus.PENDING

    @pytest.mark.asyncio
    async def test_delivery_stamps_fulfilled_at(
        self, status_service: OrderStatusService, store: InMemoryOrderStore
    ) -> None:
        order = make_order(status=OrderStatus.SHIPPED)
        await store.add(order)

        assert await status_service.advance_status(order.id, "Delivered") is True

        stored = await store.get(order.id)
        assert stored.fulfilled_at is not None
        assert stored.fulfilled_at >= stored.created_at


class TestAdvanceStatusOutcome:
    """Tests for advance_status_outcome."""

    @pytest.mark.asyncio
    async def test_distinguishes_failure_reasons(
        self, status_service: OrderStatusService, store: InMemoryOrderStore
    ) -> None:
        order = make_order()
        await store.add(order)

        assert await status_service.advance_status_outcome(uuid4(), "Confirmed") is StatusAdvanceOutcome.NOT_FOUND
        assert await status_service.advance_status_outcome(order.id, "Bogus") is StatusAdvanceOutcome.INVALID_STATUS
        assert (
            await status_service.advance_status_outcome(order.id, "Closed")
            is StatusAdvanceOutcome.INVALID_TRANSITION
        )
        assert await status_service.advance_status_outcome(order.id, "Cancelled") is StatusAdvanceOutcome.OK

    @pytest.mark.asyncio
    async def test_rejected_advance_does_not_write(self) -> None:
        """Test that the store is never updated when validation fails."""
        store = AsyncMock()
        store.get.return_value = make_order(status=OrderStatus.CANCELLED)
        service = OrderStatusService(store)

        outcome = await service.advance_status_outcome(uuid4(), "Confirmed")

        assert outcome is StatusAdvanceOutcome.INVALID_TRANSITION
        store.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_successful_advance_writes_once(self) -> None:
        store = AsyncMock()
        order = make_order()
        store.get.return_value = order
        service = OrderStatusService(store)

        await service.advance_status_outcome(order.id, "Confirmed")

        store.update.assert_awaited_once_with(order)
        assert order.status is OrderStatus.CONFIRMED
