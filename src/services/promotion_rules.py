"""Promotion rules evaluated independently against an order and a customer profile."""

import logging
from decimal import Decimal
from typing import Protocol, runtime_checkable

from src.models.customer import CustomerProfile, CustomerSegment
from src.models.order import Order

logger = logging.getLogger(__name__)

# Thresholds and rates
HIGH_VALUE_THRESHOLD = Decimal("500")
LOYALTY_VALUE_THRESHOLD = Decimal("5")

FIRST_ORDER_RATE = Decimal("0.10")
HIGH_VALUE_RATE = Decimal("0.05")
LOYALTY_RATE = Decimal("0.10")
VIP_RATE = Decimal("0.15")


@runtime_checkable
class PromotionRule(Protocol):
    """A predicate plus discount calculation. Rules hold no state."""

    name: str

    def is_match(self, order: Order, profile: CustomerProfile) -> bool:
        """Check whether the order qualifies for this rule."""
        ...

    def calculate_discount(self, order: Order) -> Decimal:
        """Amount to take off the order's original total."""
        ...


class FirstOrderDiscountRule:
    """10% off for a new customer placing their first order."""

    name = "First Order Discount"

    def is_match(self, order: Order, profile: CustomerProfile) -> bool:
        return profile.segment == CustomerSegment.NEW and profile.past_order_count == 0

    def calculate_discount(self, order: Order) -> Decimal:
        return order.total_amount * FIRST_ORDER_RATE


class HighValueOrderDiscountRule:
    """5% off orders above 500."""

    name = "High Value Order Discount"

    def is_match(self, order: Order, profile: CustomerProfile) -> bool:
        return order.total_amount > HIGH_VALUE_THRESHOLD

    def calculate_discount(self, order: Order) -> Decimal:
        return order.total_amount * HIGH_VALUE_RATE


class LoyaltyDiscountRule:
    """10% off for customers whose lifetime order value exceeds 5."""

    name = "Loyalty Discount"

    def is_match(self, order: Order, profile: CustomerProfile) -> bool:
        return profile.total_order_value > LOYALTY_VALUE_THRESHOLD

    def calculate_discount(self, order: Order) -> Decimal:
        return order.total_amount * LOYALTY_RATE


class VipCustomerDiscountRule:
    """15% off for VIP customers."""

    name = "VIP Discount"

    def is_match(self, order: Order, profile: CustomerProfile) -> bool:
        return profile.segment == CustomerSegment.VIP

    def calculate_discount(self, order: Order) -> Decimal:
        return order.total_amount * VIP_RATE


# Registry keys as used in configuration, in default registration order
RULE_REGISTRY: dict[str, type[PromotionRule]] = {
    "first_order": FirstOrderDiscountRule,
    "high_value": HighValueOrderDiscountRule,
    "loyalty": LoyaltyDiscountRule,
    "vip": VipCustomerDiscountRule,
}

DEFAULT_RULE_KEYS: tuple[str, ...] = tuple(RULE_REGISTRY)


class UnknownPromotionRuleError(ValueError):
    """Raised when configuration names a rule that is not registered."""


def build_promotion_rules(keys: list[str] | tuple[str, ...] | None = None) -> list[PromotionRule]:
    """Instantiate rules in the given registration order.

    Args:
        keys: Registry keys; defaults to every known rule.

    Returns:
        Rule instances, one per key, in key order.

    Raises:
        UnknownPromotionRuleError: If a key is not in the registry.
    """
    if keys is None:
        keys = DEFAULT_RULE_KEYS

    rules: list[PromotionRule] = []
    for key in keys:
        rule_cls = RULE_REGISTRY.get(key.strip().lower())
        if rule_cls is None:
            raise UnknownPromotionRuleError(
                f"Unknown promotion rule '{key}'. Known rules: {', '.join(RULE_REGISTRY)}"
            )
        rules.append(rule_cls())

    logger.debug("Registered promotion rules: %s", [rule.name for rule in rules])
    return rules
