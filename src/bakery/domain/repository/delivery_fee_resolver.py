"""Abstract source of the flat delivery fee for a customer."""

from __future__ import annotations

from abc import ABC, abstractmethod

from bakery.domain.model.value_objects import Money


class DeliveryFeeResolver(ABC):

    @abstractmethod
    def fee_for(self, customer_id: int) -> Money:
        """Return the fee of the customer's delivery area (zero if none)."""
