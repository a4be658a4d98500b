"""FastAPI dependency injection functions."""

from typing import Annotated

from fastapi import Depends, Request

from src.core.container import ServiceContainer
from src.services.discount_service import DiscountService
from src.services.order_analytics_service import OrderAnalyticsService
from src.services.order_query_service import OrderQueryService
from src.services.order_status_service import OrderStatusService


def get_container(request: Request) -> ServiceContainer:
    """Get the service container attached to the running application."""
    return request.app.state.container


Container = Annotated[ServiceContainer, Depends(get_container)]


def get_status_service(container: Container) -> OrderStatusService:
    return container.status_service


def get_discount_service(container: Container) -> DiscountService:
    return container.discount_service


def get_query_service(container: Container) -> OrderQueryService:
    return container.query_service


def get_analytics_service(container: Container) -> OrderAnalyticsService:
    return container.analytics_service


StatusServiceDep = Annotated[OrderStatusService, Depends(get_status_service)]
DiscountServiceDep = Annotated[DiscountService, Depends(get_discount_service)]
QueryServiceDep = Annotated[OrderQueryService, Depends(get_query_service)]
AnalyticsServiceDep = Annotated[OrderAnalyticsService, Depends(get_analytics_service)]
