"""Promotion engine combining independent discount rules."""

import logging
from collections.abc import Iterable
from decimal import Decimal

from src.models.customer import CustomerProfile
from src.models.order import Order
from src.schemas.promotion import PromotionResult
from src.services.promotion_rules import PromotionRule

logger = logging.getLogger(__name__)


class PromotionEngine:
    """Folds an ordered list of promotion rules over an order.

    Discounts are additive: each matching rule is computed against the
    original total, and the final total is floored at zero.
    """

    def __init__(self, rules: Iterable[PromotionRule]) -> None:
        """Initialize the engine.

        Args:
            rules: Rules in registration order. The engine keeps its own copy.
        """
        self._rules: tuple[PromotionRule, ...] = tuple(rules)

    @property
    def rules(self) -> tuple[PromotionRule, ...]:
        return self._rules

    def apply_discounts(self, order: Order, profile: CustomerProfile) -> PromotionResult:
        """Evaluate every rule and combine the discounts.

        Rules that match but yield a non-positive discount are left out of
        ``applied_promotions``.

        Args:
            order: Order to evaluate. It is not modified.
            profile: Profile of the order's customer.

        Returns:
            PromotionResult: A fresh, immutable result.
        """
        applied: list[str] = []
        total_discount = Decimal("0")

        for rule in self._rules:
            if not rule.is_match(order, profile):
                continue

            discount = rule.calculate_discount(order)
            if discount > 0:
                applied.append(rule.name)
                total_discount += discount
                logger.debug("Rule '%s' discounts order %s by %s", rule.name, order.id, discount)

        discounted_total = max(order.total_amount - total_discount, Decimal("0"))

        return PromotionResult(
            original_total=order.total_amount,
            discounted_total=discounted_total,
            applied_promotions=tuple(applied),
        )
