"""Lifetime-scoped wiring of stores and services."""

from dataclasses import dataclass

from src.core.config import Settings
from src.services.analytics_cache import AnalyticsCache, AnalyticsCacheConfig
from src.services.discount_service import DiscountService
from src.services.order_analytics_service import OrderAnalyticsService
from src.services.order_query_service import OrderQueryService
from src.services.order_status_service import OrderStatusService
from src.services.order_store import InMemoryOrderStore
from src.services.profile_service import InMemoryCustomerProfileService
from src.services.promotion_engine import PromotionEngine
from src.services.promotion_rules import build_promotion_rules
from src.services.status_transitions import StatusTransitionMatrix


@dataclass
class ServiceContainer:
    """Shared components for one application instance.

    Built once and passed by reference; tests build their own.
    """

    order_store: InMemoryOrderStore
    profile_service: InMemoryCustomerProfileService
    analytics_cache: AnalyticsCache
    promotion_engine: PromotionEngine
    status_service: OrderStatusService
    discount_service: DiscountService
    query_service: OrderQueryService
    analytics_service: OrderAnalyticsService


def build_container(
    settings: Settings,
    order_store: InMemoryOrderStore | None = None,
    profile_service: InMemoryCustomerProfileService | None = None,
) -> ServiceContainer:
    """Create every service from settings.

    Args:
        settings: Application settings.
        order_store: Optional pre-populated store.
        profile_service: Optional pre-populated profile lookup.

    Returns:
        ServiceContainer: Fully wired services.

    Raises:
        UnknownPromotionRuleError: If settings name an unknown promotion rule.
    """
    order_store = order_store if order_store is not None else InMemoryOrderStore()
    profile_service = profile_service if profile_service is not None else InMemoryCustomerProfileService()
    cache = AnalyticsCache(AnalyticsCacheConfig.from_settings(settings))
    engine = PromotionEngine(build_promotion_rules(settings.promotion_rules_list))

    return ServiceContainer(
        order_store=order_store,
        profile_service=profile_service,
        analytics_cache=cache,
        promotion_engine=engine,
        status_service=OrderStatusService(order_store, StatusTransitionMatrix()),
        discount_service=DiscountService(order_store, profile_service, engine),
        query_service=OrderQueryService(order_store, profile_service, engine),
        analytics_service=OrderAnalyticsService(order_store, cache),
    )
