"""Domain-level exceptions.

All failures of the checkout pipeline are subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.

Validation failures are the caller's fault and are fixed by correcting the
input.  Persistence and lookup failures come from the stores and are never
retried by the core.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bakery.domain.model.order import Submission


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class Unauthenticated(ValidationError):
    """The customer does not identify an authenticated session."""


class InvalidTotal(ValidationError):
    """The order total is missing, malformed or negative."""


class InvalidMode(ValidationError):
    """The fulfillment mode is blank or not a recognised value."""


class EmptyCart(ValidationError):
    """Checkout was attempted with nothing in the cart."""


class PersistenceFailure(DomainException):
    """A store could not complete a write.

    ``submission`` is the checkout attempt that was interrupted, if any.
    Its state tells whether anything was already written.
    """

    def __init__(self, message: str, submission: Submission | None = None) -> None:
        super().__init__(message)
        self.submission = submission


class CatalogLookupError(DomainException):
    """The catalog could not be queried (distinct from "not found")."""
