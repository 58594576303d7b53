"""Application service: List Orders use case (query).

Backs the customer's order history, newest first.
"""

from __future__ import annotations

from bakery.application.dto import OrderSummaryDTO
from bakery.domain.exceptions import Unauthenticated
from bakery.domain.model.order import OrderHeader
from bakery.domain.repository.order_store import OrderStore


class ListOrdersHandler:

    def __init__(self, order_store: OrderStore) -> None:
        self._order_store = order_store

    def handle(self, customer_id: int) -> list[OrderSummaryDTO]:
        if customer_id is None or customer_id <= 0:
            raise Unauthenticated("Invalid customer. Please log in again.")
        headers = sorted(
            self._order_store.find_by_customer(customer_id),
            key=lambda h: (h.created_at, h.id),
            reverse=True,
        )
        return [self._to_dto(h) for h in headers]

    @staticmethod
    def _to_dto(header: OrderHeader) -> OrderSummaryDTO:
        return OrderSummaryDTO(
            id=header.id,
            created_at=header.created_at.strftime("%Y-%m-%d %H:%M UTC"),
            total=str(header.total),
            mode=header.mode.value,
            notes=header.notes,
        )
