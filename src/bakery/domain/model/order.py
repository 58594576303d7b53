"""Orders: the persisted header, its line items, and the checkout attempt.

Once written, headers and lines are owned by the stores and never
modified by the core.  ``Submission`` tracks one checkout attempt so that
a half-written order is an explicit, inspectable outcome.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from bakery.domain.exceptions import InvalidMode, ValidationError
from bakery.domain.model.value_objects import Money, Quantity


class FulfillmentMode(Enum):
    DELIVERY = "DELIVERY"
    PICKUP = "PICKUP"

    @staticmethod
    def parse(raw: FulfillmentMode | str | None) -> FulfillmentMode:
        """Accept an enum member or its name in any case."""
        if isinstance(raw, FulfillmentMode):
            return raw
        if raw is None or not str(raw).strip():
            raise InvalidMode("Fulfillment mode is required")
        try:
            return FulfillmentMode(str(raw).strip().upper())
        except ValueError as exc:
            raise InvalidMode(
                f"Unknown fulfillment mode '{raw}' (expected delivery or pickup)"
            ) from exc


@dataclass(frozen=True)
class OrderHeader:
    id: int
    customer_id: int
    created_at: datetime
    total: Money
    mode: FulfillmentMode
    notes: str | None = None


@dataclass(frozen=True)
class OrderLine:
    """One product/quantity/price-at-sale row of an order.

    ``price_at_moment`` is the unit price captured at checkout and never
    follows later catalog changes.
    """

    id: int
    order_id: int
    product_id: str
    quantity: Quantity
    price_at_moment: Money

    @property
    def line_total(self) -> Money:
        return self.price_at_moment * self.quantity.value


class SubmissionState(Enum):
    PENDING = "PENDING"
    HEADER_WRITTEN = "HEADER_WRITTEN"
    LINES_WRITING = "LINES_WRITING"
    COMMITTED = "COMMITTED"
    PARTIALLY_WRITTEN = "PARTIALLY_WRITTEN"


_TRANSITIONS: dict[SubmissionState, tuple[SubmissionState, ...]] = {
    SubmissionState.PENDING: (SubmissionState.HEADER_WRITTEN,),
    SubmissionState.HEADER_WRITTEN: (
        SubmissionState.LINES_WRITING,
        SubmissionState.PARTIALLY_WRITTEN,
    ),
    SubmissionState.LINES_WRITING: (
        SubmissionState.COMMITTED,
        SubmissionState.PARTIALLY_WRITTEN,
    ),
    SubmissionState.COMMITTED: (),
    SubmissionState.PARTIALLY_WRITTEN: (),
}


@dataclass
class Submission:
    """A single checkout attempt.

    PENDING -> HEADER_WRITTEN -> LINES_WRITING -> COMMITTED | PARTIALLY_WRITTEN

    A header failure leaves the attempt in PENDING: nothing was written.
    PARTIALLY_WRITTEN means the header (and possibly some lines) is
    persisted but the attempt was aborted; nothing is rolled back.
    """

    customer_id: int
    mode: FulfillmentMode
    total: Money
    notes: str | None = None
    state: SubmissionState = SubmissionState.PENDING
    order_id: int | None = None
    lines_written: list[str] = field(default_factory=list)
    lines_skipped: list[str] = field(default_factory=list)

    # --- State transitions ----------------------------------------------------

    def header_written(self, order_id: int) -> None:
        self._move_to(SubmissionState.HEADER_WRITTEN)
        self.order_id = order_id

    def start_lines(self) -> None:
        self._move_to(SubmissionState.LINES_WRITING)

    def line_written(self, product_id: str) -> None:
        self._require(SubmissionState.LINES_WRITING)
        self.lines_written.append(product_id)

    def line_skipped(self, product_id: str) -> None:
        self._require(SubmissionState.LINES_WRITING)
        self.lines_skipped.append(product_id)

    def commit(self) -> None:
        self._move_to(SubmissionState.COMMITTED)

    def abort(self) -> None:
        """Mark the attempt as interrupted after the header was written."""
        self._move_to(SubmissionState.PARTIALLY_WRITTEN)

    # --- Computed properties --------------------------------------------------

    @property
    def is_committed(self) -> bool:
        return self.state == SubmissionState.COMMITTED

    # --- Internal helpers -----------------------------------------------------

    def _require(self, state: SubmissionState) -> None:
        if self.state != state:
            raise ValidationError(
                f"Submission is {self.state.value}, expected {state.value}"
            )

    def _move_to(self, target: SubmissionState) -> None:
        if target not in _TRANSITIONS[self.state]:
            raise ValidationError(
                f"Cannot move submission from {self.state.value} to {target.value}"
            )
        self.state = target
