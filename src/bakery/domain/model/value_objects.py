"""Money and Quantity, the two values every price and order line is built from.

Both are frozen dataclasses checked in ``__post_init__``: an instance that
exists is already valid, so callers never re-check amounts or counts.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from bakery.domain.exceptions import ValidationError

DEFAULT_CURRENCY = "BRL"


@functools.total_ordering
@dataclass(frozen=True)
class Money:
    """A non-negative Decimal price in one currency (reais by default).

    The cart projection and the checkout both price through this type, so
    the subtotal shown and the amount charged agree to the cent.
    """

    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Price must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Price must be finite, got {self.amount}")
        if self.amount.is_signed() and self.amount != 0:
            raise ValidationError(f"Price cannot be negative, got {self.amount}")

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + self._amount_of(other), self.currency)

    def __mul__(self, quantity: int) -> Money:
        if not isinstance(quantity, int) or isinstance(quantity, bool):
            raise TypeError(f"A price scales by a whole quantity, got {type(quantity).__name__}")
        return Money(self.amount * quantity, self.currency)

    def __lt__(self, other: Money) -> bool:
        return self.amount < self._amount_of(other)

    def __str__(self) -> str:
        return f"R$ {self.amount:.2f}"

    def _amount_of(self, other: Money) -> Decimal:
        if other.currency != self.currency:
            raise ValidationError(
                f"Cannot mix {self.currency} and {other.currency} prices"
            )
        return other.amount

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Build from user or file input; ``10``, ``"10.50"`` and ``2.5`` all work.

        Floats go through ``str`` first so ``0.1`` stays ``Decimal("0.1")``.
        """
        try:
            return Money(Decimal(str(amount).strip()))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0.00"))


@dataclass(frozen=True)
class Quantity:
    """How many units a persisted order line holds; always at least one."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value < 1:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)
