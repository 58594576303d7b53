"""Domain service: unit price of a catalog record.

unit = base price + size price + flavor level price

Every contributor is optional and counts as zero when absent.  The rule is
applied independently when the cart is displayed and again at checkout, so
both paths must go through this function.
"""

from __future__ import annotations

from bakery.domain.model.catalog import CatalogRecord
from bakery.domain.model.value_objects import Money


def unit_price(record: CatalogRecord) -> Money:
    total = Money.zero()
    for part in _price_parts(record):
        if part is not None:
            total = total + part
    return total


def _price_parts(record: CatalogRecord) -> tuple[Money | None, ...]:
    size_price = record.size.price if record.size is not None else None
    level = record.flavor.level if record.flavor is not None else None
    level_price = level.price if level is not None else None
    return record.base_price, size_price, level_price
