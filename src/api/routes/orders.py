"""Order API routes."""

from uuid import UUID

from fastapi import APIRouter, Query, Response, status

from src.api.deps import (
    AnalyticsServiceDep,
    DiscountServiceDep,
    QueryServiceDep,
    StatusServiceDep,
)
from src.api.middleware.error_handler import BadRequestError, NotFoundError
from src.models.order_status import OrderStatus
from src.schemas.analytics import OrderAnalytics
from src.schemas.order import OrderListResponse
from src.schemas.promotion import PromotionResult
from src.services.order_status_service import StatusAdvanceOutcome

router = APIRouter(prefix="/orders", tags=["orders"])


@router.get(
    "",
    response_model=OrderListResponse,
    summary="List orders",
    description="Returns all orders with applied and currently eligible promotions.",
)
async def list_orders(service: QueryServiceDep) -> OrderListResponse:
    """List all orders."""
    return OrderListResponse(items=await service.list_orders())


@router.get(
    "/analytics",
    response_model=OrderAnalytics,
    summary="Order analytics",
    description="Summary metrics over all orders. Cached for a short TTL.",
)
async def get_order_analytics(service: AnalyticsServiceDep) -> OrderAnalytics:
    """Get order analytics."""
    return await service.get_analytics()


@router.post(
    "/{order_id}/status/advance",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={
        400: {"description": "Unknown status or transition not allowed"},
        404: {"description": "Order not found"},
    },
    summary="Advance order status",
)
async def advance_order_status(
    order_id: UUID,
    service: StatusServiceDep,
    new_status: str = Query(description="Target status name, case-insensitive"),
) -> Response:
    """Move an order to a new status.

    Raises:
        NotFoundError: If the order does not exist.
        BadRequestError: If the status is unknown or the transition is not allowed.
    """
    outcome = await service.advance_status_outcome(order_id, new_status)

    if outcome is StatusAdvanceOutcome.NOT_FOUND:
        raise NotFoundError("Order not found")
    if outcome is StatusAdvanceOutcome.INVALID_STATUS:
        raise BadRequestError(
            f"Unknown order status '{new_status}'",
            details=[
                {
                    "loc": ["query", "new_status"],
                    "msg": "Expected one of: " + ", ".join(s.value for s in OrderStatus),
                    "type": "invalid_status",
                }
            ],
        )
    if outcome is StatusAdvanceOutcome.INVALID_TRANSITION:
        raise BadRequestError(f"Order cannot move to '{new_status}' from its current status")

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{order_id}/apply-discount",
    response_model=PromotionResult,
    responses={404: {"description": "Order or customer profile not found"}},
    summary="Apply promotions to an order",
)
async def apply_discount(order_id: UUID, service: DiscountServiceDep) -> PromotionResult:
    """Evaluate promotions for an order and persist the discounted total.

    Raises:
        NotFoundError: If the order or its customer's profile does not exist.
    """
    result = await service.apply_to_order(order_id)
    if result is None:
        raise NotFoundError("Order or customer profile not found")
    return result
