"""Application service: Show Order Items use case (query).

Displays the price snapshot stored on each line, never the current
catalog price.  The catalog is only consulted for the product name.
"""

from __future__ import annotations

from bakery.application.dto import OrderItemSummaryDTO
from bakery.domain.exceptions import ValidationError
from bakery.domain.repository.catalog_lookup import CatalogLookup
from bakery.domain.repository.order_store import LineItemStore


class ShowOrderItemsHandler:

    def __init__(self, line_store: LineItemStore, catalog: CatalogLookup) -> None:
        self._line_store = line_store
        self._catalog = catalog

    def handle(self, order_id: int) -> list[OrderItemSummaryDTO]:
        if order_id is None or order_id <= 0:
            raise ValidationError("Invalid order.")

        items: list[OrderItemSummaryDTO] = []
        for line in self._line_store.find_by_order(order_id):
            record = self._catalog.find_by_id(line.product_id)
            name = record.name if record is not None else f"#{line.product_id}"
            items.append(
                OrderItemSummaryDTO(
                    product_name=name,
                    quantity=line.quantity.value,
                    price_at_moment=str(line.price_at_moment),
                    line_total=str(line.line_total),
                )
            )
        return items
