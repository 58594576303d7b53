"""Application service: Project Cart use case (query).

Prices every cart line against the *current* catalog for display.  This is
a best-effort view: a product that no longer exists is dropped from the
rows and the subtotal.  Only a failure of the catalog itself propagates.
"""

from __future__ import annotations

import structlog

from bakery.application.dto import CartRowDTO, CartViewDTO
from bakery.domain.model.cart import Cart
from bakery.domain.model.value_objects import Money
from bakery.domain.repository.catalog_lookup import CatalogLookup
from bakery.domain.service.pricing import unit_price

logger = structlog.get_logger(__name__)


class ProjectCartHandler:

    def __init__(self, cart: Cart, catalog: CatalogLookup) -> None:
        self._cart = cart
        self._catalog = catalog

    def handle(self) -> CartViewDTO:
        rows: list[CartRowDTO] = []
        subtotal = Money.zero()

        for product_id, quantity in self._cart.snapshot().items():
            record = self._catalog.find_by_id(product_id)
            if record is None:
                logger.info("Dropping cart line for missing product", product_id=product_id)
                continue

            unit = unit_price(record)
            line_total = unit * quantity
            subtotal = subtotal + line_total
            rows.append(
                CartRowDTO(
                    product_id=product_id,
                    product_name=record.name,
                    quantity=quantity,
                    unit_price=unit,
                    line_total=line_total,
                )
            )

        return CartViewDTO(rows=rows, subtotal=subtotal)
