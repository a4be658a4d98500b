"""Order analytics aggregation."""

import logging
from collections.abc import Callable
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

from src.models.order import Order, utc_now
from src.schemas.analytics import OrderAnalytics
from src.services.analytics_cache import AnalyticsCache
from src.services.order_store import OrderStore

logger = logging.getLogger(__name__)

ANALYTICS_CACHE_KEY = "order_analytics"

# Trailing window for recent order counts, today included
RECENT_WINDOW_DAYS = 7


class OrderAnalyticsService:
    """Computes summary metrics over the whole order set.

    Results, including the all-zero summary for an empty store, are cached
    under a single key for the cache's TTL. A hit never touches the store.
    """

    def __init__(
        self,
        order_store: OrderStore,
        cache: AnalyticsCache,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """Initialize the analytics service.

        Args:
            order_store: Store holding the orders.
            cache: Shared analytics cache.
            clock: Source of the current UTC time, anchoring the 7-day window.
        """
        self.order_store = order_store
        self.cache = cache
        self.clock = clock

    async def get_analytics(self) -> OrderAnalytics:
        """Get the analytics summary, computing it on a cache miss."""
        cached = self.cache.get(ANALYTICS_CACHE_KEY)
        if cached is not None:
            return cached

        orders = await self.order_store.get_all()
        analytics = self.compute(orders)
        self.cache.set(ANALYTICS_CACHE_KEY, analytics)

        logger.info("Computed analytics over %d orders", len(orders))
        return analytics

    def compute(self, orders: list[Order]) -> OrderAnalytics:
        """Derive the summary metrics from a list of orders."""
        if not orders:
            return OrderAnalytics()

        count = len(orders)

        average_order_value = round(float(sum((o.total_amount for o in orders), Decimal("0")) / count), 2)

        fulfilled = [o for o in orders if o.fulfilled_at is not None]
        average_fulfillment_hours = 0.0
        if fulfilled:
            hours = [(o.fulfilled_at - o.created_at) / timedelta(hours=1) for o in fulfilled]
            average_fulfillment_hours = float(round(sum(hours) / len(hours)))

        created_dates = [_utc_date(o.created_at) for o in orders]
        report_days_covered = (max(created_dates) - min(created_dates)).days + 1
        if report_days_covered > 0:
            average_daily_orders = round(count / report_days_covered, 2)
        else:
            average_daily_orders = float(count)

        window_start = _utc_date(self.clock()) - timedelta(days=RECENT_WINDOW_DAYS - 1)
        recent_count = sum(1 for d in created_dates if d >= window_start)

        total_discount = sum((o.discount_amount for o in orders), Decimal("0"))
        average_discount = round(float(total_discount / count), 2)

        return OrderAnalytics(
            average_order_value=average_order_value,
            average_fulfillment_time_hours=average_fulfillment_hours,
            average_daily_orders=average_daily_orders,
            total_orders_last_seven_days=recent_count,
            report_days_covered=report_days_covered,
            average_discount=average_discount,
        )


def _utc_date(value: datetime) -> date:
    return value.astimezone(timezone.utc).date()
