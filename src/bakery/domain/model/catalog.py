"""Catalog records as seen by the checkout pipeline.

The catalog is maintained elsewhere; the core only reads it.  A product's
price is composed of its own base price plus the price of its size and the
price of its flavor's level.  Any of those contributors may be missing.
"""

from __future__ import annotations

from dataclasses import dataclass

from bakery.domain.model.value_objects import Money


@dataclass(frozen=True)
class Size:
    name: str
    price: Money | None = None


@dataclass(frozen=True)
class FlavorLevel:
    """Price tier of a flavor (e.g. "Traditional", "Gourmet")."""

    name: str
    price: Money | None = None


@dataclass(frozen=True)
class Flavor:
    name: str
    level: FlavorLevel | None = None


@dataclass(frozen=True)
class CatalogRecord:
    """Current, authoritative description of a purchasable product."""

    id: str
    name: str
    base_price: Money | None = None
    size: Size | None = None
    flavor: Flavor | None = None
