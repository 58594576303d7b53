"""Abstract catalog lookup used by the checkout pipeline.

Defined in the domain layer so the domain never depends on
infrastructure.  Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from bakery.domain.model.catalog import CatalogRecord


class CatalogLookup(ABC):

    @abstractmethod
    def find_by_id(self, product_id: str) -> CatalogRecord | None:
        """Return the current record for a product, or None if it is gone.

        Raises CatalogLookupError if the catalog itself cannot be read.
        """
