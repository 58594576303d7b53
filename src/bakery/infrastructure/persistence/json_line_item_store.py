"""JSON-file-backed implementation of LineItemStore."""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from bakery.domain.exceptions import PersistenceFailure
from bakery.domain.model.order import OrderLine
from bakery.domain.model.value_objects import Money, Quantity
from bakery.domain.repository.order_store import LineItemStore


class JsonLineItemStore(LineItemStore):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- LineItemStore interface ----------------------------------------------

    def create_line(
        self,
        order_id: int,
        product_id: str,
        quantity: int,
        price_at_moment: Money,
    ) -> bool:
        records = self._load_raw()
        records.append(
            {
                "id": max((r["id"] for r in records), default=0) + 1,
                "order_id": order_id,
                "product_id": product_id,
                "quantity": quantity,
                "price_at_moment": str(price_at_moment.amount),
                "currency": price_at_moment.currency,
            }
        )
        self._persist_raw(records)
        return True

    def find_by_order(self, order_id: int) -> list[OrderLine]:
        return [
            self._to_domain(raw)
            for raw in self._load_raw()
            if raw["order_id"] == order_id
        ]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_domain(raw: dict) -> OrderLine:
        return OrderLine(
            id=raw["id"],
            order_id=raw["order_id"],
            product_id=raw["product_id"],
            quantity=Quantity(raw["quantity"]),
            price_at_moment=Money(Decimal(raw["price_at_moment"]), raw["currency"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        try:
            return json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise PersistenceFailure(f"Cannot read order items: {exc}") from exc

    def _persist_raw(self, records: list[dict]) -> None:
        try:
            self._file_path.write_text(
                json.dumps(records, indent=2) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            raise PersistenceFailure(f"Cannot write order items: {exc}") from exc

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
