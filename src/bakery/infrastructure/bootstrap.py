"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

It also owns the process-wide cart and session: created once at import,
alive for the whole process, never torn down.
"""

from __future__ import annotations

from pathlib import Path

from bakery.domain.model.cart import Cart
from bakery.domain.model.session import CustomerSession
from bakery.infrastructure.persistence.json_catalog_repository import (
    JsonCatalogRepository,
)
from bakery.infrastructure.persistence.json_customer_directory import (
    JsonCustomerDirectory,
)
from bakery.infrastructure.persistence.json_line_item_store import (
    JsonLineItemStore,
)
from bakery.infrastructure.persistence.json_order_store import JsonOrderStore

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

_CART = Cart()
_SESSION = CustomerSession()


def cart_session() -> Cart:
    return _CART


def customer_session() -> CustomerSession:
    return _SESSION


def catalog_repository(data_dir: Path = DEFAULT_DATA_DIR) -> JsonCatalogRepository:
    return JsonCatalogRepository(data_dir / "catalog.json")


def customer_directory(data_dir: Path = DEFAULT_DATA_DIR) -> JsonCustomerDirectory:
    return JsonCustomerDirectory(data_dir / "customers.json")


def order_store(data_dir: Path = DEFAULT_DATA_DIR) -> JsonOrderStore:
    return JsonOrderStore(data_dir / "orders.json")


def line_item_store(data_dir: Path = DEFAULT_DATA_DIR) -> JsonLineItemStore:
    return JsonLineItemStore(data_dir / "order_items.json")
