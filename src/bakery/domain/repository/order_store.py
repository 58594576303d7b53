"""Abstract stores for order headers and their line items.

Writes report failure through their return value (``None`` / ``False``)
or by raising PersistenceFailure.  Neither store offers transactions.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from bakery.domain.model.order import FulfillmentMode, OrderHeader, OrderLine
from bakery.domain.model.value_objects import Money


class OrderStore(ABC):

    @abstractmethod
    def create_header(
        self,
        customer_id: int,
        created_at: datetime,
        total: Money,
        mode: FulfillmentMode,
        notes: str | None,
    ) -> int | None:
        """Persist a new order header and return its generated ID, or None."""

    @abstractmethod
    def find_by_customer(self, customer_id: int) -> list[OrderHeader]:
        """Return every order of a customer, in creation order."""


class LineItemStore(ABC):

    @abstractmethod
    def create_line(
        self,
        order_id: int,
        product_id: str,
        quantity: int,
        price_at_moment: Money,
    ) -> bool:
        """Persist one line item; return True if it was written."""

    @abstractmethod
    def find_by_order(self, order_id: int) -> list[OrderLine]:
        """Return the line items of an order in creation order."""
