"""JSON-file-backed customer directory.

Only what checkout needs: whether a customer exists, and the flat
delivery fee of the area their address belongs to.
"""

from __future__ import annotations

import json
from decimal import Decimal, InvalidOperation
from pathlib import Path

from bakery.domain.exceptions import PersistenceFailure, ValidationError
from bakery.domain.model.value_objects import Money
from bakery.domain.repository.delivery_fee_resolver import DeliveryFeeResolver


class JsonCustomerDirectory(DeliveryFeeResolver):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    def exists(self, customer_id: int) -> bool:
        return self._find(customer_id) is not None

    def fee_for(self, customer_id: int) -> Money:
        raw = self._find(customer_id)
        area = raw.get("area") if raw is not None else None
        if area is None:
            return Money.zero()
        try:
            fee = area.get("fee")
            return Money(Decimal(str(fee))) if fee is not None else Money.zero()
        except (AttributeError, InvalidOperation, ValidationError) as exc:
            raise PersistenceFailure(
                f"Malformed delivery area for customer #{customer_id}: {area!r}"
            ) from exc

    def _find(self, customer_id: int) -> dict | None:
        for raw in self._load_raw():
            if not isinstance(raw, dict):
                raise PersistenceFailure(f"Malformed customer record: {raw!r}")
            if raw.get("id") == customer_id:
                return raw
        return None

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list:
        try:
            records = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise PersistenceFailure(f"Cannot read customers: {exc}") from exc
        if not isinstance(records, list):
            raise PersistenceFailure("Cannot read customers: expected a list")
        return records

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
