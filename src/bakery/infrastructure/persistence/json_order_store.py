"""JSON-file-backed implementation of OrderStore."""

from __future__ import annotations

import json
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from bakery.domain.exceptions import PersistenceFailure
from bakery.domain.model.order import FulfillmentMode, OrderHeader
from bakery.domain.model.value_objects import Money
from bakery.domain.repository.order_store import OrderStore


class JsonOrderStore(OrderStore):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- OrderStore interface -------------------------------------------------

    def create_header(
        self,
        customer_id: int,
        created_at: datetime,
        total: Money,
        mode: FulfillmentMode,
        notes: str | None,
    ) -> int | None:
        records = self._load_raw()
        order_id = max((r["id"] for r in records), default=0) + 1
        records.append(
            {
                "id": order_id,
                "customer_id": customer_id,
                "created_at": created_at.isoformat(),
                "total": str(total.amount),
                "currency": total.currency,
                "mode": mode.value,
                "notes": notes,
            }
        )
        self._persist_raw(records)
        return order_id

    def find_by_customer(self, customer_id: int) -> list[OrderHeader]:
        return [
            self._to_domain(raw)
            for raw in self._load_raw()
            if raw["customer_id"] == customer_id
        ]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_domain(raw: dict) -> OrderHeader:
        return OrderHeader(
            id=raw["id"],
            customer_id=raw["customer_id"],
            created_at=datetime.fromisoformat(raw["created_at"]),
            total=Money(Decimal(raw["total"]), raw["currency"]),
            mode=FulfillmentMode(raw["mode"]),
            notes=raw.get("notes"),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        try:
            return json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise PersistenceFailure(f"Cannot read orders: {exc}") from exc

    def _persist_raw(self, records: list[dict]) -> None:
        try:
            self._file_path.write_text(
                json.dumps(records, indent=2) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            raise PersistenceFailure(f"Cannot write orders: {exc}") from exc

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
