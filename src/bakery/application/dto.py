"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.  Money stays as Money so
callers can keep doing exact arithmetic (e.g. subtotal + delivery fee).
"""

from __future__ import annotations

from dataclasses import dataclass

from bakery.domain.model.value_objects import Money


@dataclass(frozen=True)
class CartRowDTO:
    """Output: one cart line as displayed to the user."""

    product_id: str
    product_name: str
    quantity: int
    unit_price: Money
    line_total: Money


@dataclass(frozen=True)
class CartViewDTO:
    """Output: the priced cart (delivery fee not included)."""

    rows: list[CartRowDTO]
    subtotal: Money


@dataclass(frozen=True)
class CheckoutQuoteDTO:
    """Output: what the checkout screen shows before confirmation."""

    view: CartViewDTO
    delivery_fee: Money
    total: Money


@dataclass(frozen=True)
class OrderSummaryDTO:
    id: int
    created_at: str
    total: str  # formatted, e.g. "R$ 45.00"
    mode: str
    notes: str | None


@dataclass(frozen=True)
class OrderItemSummaryDTO:
    product_name: str
    quantity: int
    price_at_moment: str
    line_total: str
