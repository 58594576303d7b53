"""JSON-file-backed implementation of CatalogLookup."""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from bakery.domain.exceptions import CatalogLookupError, ValidationError
from bakery.domain.model.catalog import CatalogRecord, Flavor, FlavorLevel, Size
from bakery.domain.model.value_objects import Money
from bakery.domain.repository.catalog_lookup import CatalogLookup


class JsonCatalogRepository(CatalogLookup):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- CatalogLookup interface ----------------------------------------------

    def find_by_id(self, product_id: str) -> CatalogRecord | None:
        for raw in self._load_raw():
            if self._id_of(raw) == product_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[CatalogRecord]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _id_of(raw: object) -> str:
        if not isinstance(raw, dict) or raw.get("id") is None:
            raise CatalogLookupError(f"Malformed catalog record: {raw!r}")
        return str(raw["id"])

    @classmethod
    def _to_domain(cls, raw: dict) -> CatalogRecord:
        try:
            return CatalogRecord(
                id=cls._id_of(raw),
                name=raw["name"],
                base_price=cls._money(raw.get("base_price")),
                size=cls._size(raw.get("size")),
                flavor=cls._flavor(raw.get("flavor")),
            )
        except (
            KeyError, TypeError, AttributeError, ArithmeticError, ValueError, ValidationError
        ) as exc:
            raise CatalogLookupError(f"Malformed catalog record: {raw!r}") from exc

    @staticmethod
    def _money(value: str | None) -> Money | None:
        if value is None:
            return None
        return Money(Decimal(str(value)))

    @classmethod
    def _size(cls, raw: dict | None) -> Size | None:
        if raw is None:
            return None
        return Size(name=raw["name"], price=cls._money(raw.get("price")))

    @classmethod
    def _flavor(cls, raw: dict | None) -> Flavor | None:
        if raw is None:
            return None
        level = raw.get("level")
        return Flavor(
            name=raw["name"],
            level=(
                FlavorLevel(name=level["name"], price=cls._money(level.get("price")))
                if level is not None
                else None
            ),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list:
        try:
            records = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise CatalogLookupError(f"Cannot read catalog: {exc}") from exc
        if not isinstance(records, list):
            raise CatalogLookupError("Cannot read catalog: expected a list")
        return records

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
