"""Cart aggregate: the items the customer intends to buy, keyed by product.

The cart lives in memory for the lifetime of the process and is never
persisted.  Insertion order is kept for display only.

Invalid input (missing product id, non-positive quantity on ``add``) is
ignored rather than raised.  That decision is made in one place,
``CartInputPolicy``, so a stricter policy can be injected without touching
the aggregate.
"""

from __future__ import annotations

import threading
from types import MappingProxyType
from typing import Mapping

import structlog

from bakery.domain.exceptions import ValidationError

logger = structlog.get_logger(__name__)


class CartInputPolicy:
    """Lenient policy: invalid input turns the operation into a no-op."""

    def accept_product(self, product_id: str | None) -> bool:
        return product_id is not None and bool(str(product_id).strip())

    def accept_add_quantity(self, quantity: int) -> bool:
        return self.accept_set_quantity(quantity) and quantity > 0

    def accept_set_quantity(self, quantity: int) -> bool:
        return isinstance(quantity, int) and not isinstance(quantity, bool)

    def reject(self, reason: str) -> None:
        logger.debug("Cart input ignored", reason=reason)


class StrictCartInputPolicy(CartInputPolicy):
    """Raises ValidationError instead of silently ignoring bad input."""

    def reject(self, reason: str) -> None:
        raise ValidationError(reason)


class Cart:
    """Aggregate root for the shopping cart.

    Invariants:
    - every stored quantity is > 0
    - product ids are unique

    ``lock`` guards all read-modify-write sequences.  It is re-entrant so
    the checkout protocol can hold it for a whole submission while still
    calling ``clear()``.
    """

    def __init__(self, policy: CartInputPolicy | None = None) -> None:
        self._lines: dict[str, int] = {}
        self._policy = policy or CartInputPolicy()
        self.lock = threading.RLock()

    # --- Mutations ------------------------------------------------------------

    def add(self, product_id: str | None, quantity: int) -> None:
        """Accumulate *quantity* onto the product's line, creating it if needed."""
        if not self._policy.accept_product(product_id):
            self._policy.reject("Product id is required")
            return
        if not self._policy.accept_add_quantity(quantity):
            self._policy.reject("Quantity to add must be positive")
            return

        key = str(product_id).strip()
        with self.lock:
            self._lines[key] = self._lines.get(key, 0) + quantity
            logger.debug("Cart line added", product_id=key, quantity=self._lines[key])

    def set(self, product_id: str | None, quantity: int) -> None:
        """Overwrite the product's quantity; zero or less removes the line."""
        if not self._policy.accept_product(product_id):
            self._policy.reject("Product id is required")
            return
        if not self._policy.accept_set_quantity(quantity):
            self._policy.reject("Quantity must be an integer")
            return

        key = str(product_id).strip()
        with self.lock:
            if quantity <= 0:
                self._lines.pop(key, None)
                logger.debug("Cart line removed", product_id=key)
                return
            self._lines[key] = quantity
            logger.debug("Cart line set", product_id=key, quantity=quantity)

    def remove(self, product_id: str | None) -> None:
        if product_id is None:
            return
        with self.lock:
            self._lines.pop(str(product_id).strip(), None)

    def clear(self) -> None:
        with self.lock:
            self._lines.clear()
            logger.debug("Cart cleared")

    # --- Queries --------------------------------------------------------------

    def snapshot(self) -> Mapping[str, int]:
        """Read-only, insertion-ordered copy of the cart lines."""
        with self.lock:
            return MappingProxyType(dict(self._lines))

    def is_empty(self) -> bool:
        return not self._lines

    def quantity_of(self, product_id: str) -> int:
        return self._lines.get(product_id, 0)

    def __len__(self) -> int:
        return len(self._lines)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._lines
