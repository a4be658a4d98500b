"""Customer profile lookup."""

import logging
from collections.abc import Iterable
from threading import Lock
from typing import Protocol
from uuid import UUID

from src.models.customer import CustomerProfile

logger = logging.getLogger(__name__)


class CustomerProfileService(Protocol):
    """Async customer profile lookup."""

    async def get_profile(self, customer_id: UUID) -> CustomerProfile | None: ...

    async def get_profiles(self, customer_ids: Iterable[UUID]) -> dict[UUID, CustomerProfile]: ...


class InMemoryCustomerProfileService:
    """Dict-backed profile lookup. Profiles are replaced whole, never edited."""

    def __init__(self, profiles: Iterable[CustomerProfile] | None = None) -> None:
        self._profiles: dict[UUID, CustomerProfile] = {}
        self._lock = Lock()
        for profile in profiles or ():
            self.add(profile)

    async def get_profile(self, customer_id: UUID) -> CustomerProfile | None:
        """Get a customer's profile.

        Args:
            customer_id: The customer's UUID.

        Returns:
            CustomerProfile or None if the customer is unknown.
        """
        with self._lock:
            profile = self._profiles.get(customer_id)

        if profile is None:
            logger.debug("No profile for customer %s", customer_id)
        return profile

    async def get_profiles(self, customer_ids: Iterable[UUID]) -> dict[UUID, CustomerProfile]:
        """Get profiles for several customers, skipping unknown IDs."""
        with self._lock:
            return {
                customer_id: self._profiles[customer_id]
                for customer_id in customer_ids
                if customer_id in self._profiles
            }

    def add(self, profile: CustomerProfile) -> None:
        """Insert or replace a profile."""
        with self._lock:
            self._profiles[profile.customer_id] = profile
