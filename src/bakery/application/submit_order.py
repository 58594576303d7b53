"""Application service: Submit Order use case (checkout).

Turns the cart into a persisted order:

1. Validate the submission (customer, total, mode, non-empty cart).
2. Write the order header and obtain its ID.
3. For every cart line, in insertion order, re-fetch the product, price it
   with the pricing rule and write a line item with that price snapshot.
   Products that have left the catalog are skipped.
4. Clear the cart, only if every line was processed.

The stores have no transactions.  A failure after step 2 leaves the header
and any lines already written in place; the raised PersistenceFailure
carries the Submission in PARTIALLY_WRITTEN state so the caller can see
what happened.  Nothing is retried.

The price charged comes from a fresh catalog fetch, so it reflects any
price change made after the customer last looked at the cart.
"""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from typing import Callable

import structlog

from bakery.application.quote_checkout import QuoteCheckoutHandler
from bakery.domain.exceptions import (
    CatalogLookupError,
    EmptyCart,
    InvalidTotal,
    PersistenceFailure,
    Unauthenticated,
    ValidationError,
)
from bakery.domain.model.cart import Cart
from bakery.domain.model.order import FulfillmentMode, Submission
from bakery.domain.model.session import CustomerSession
from bakery.domain.model.value_objects import Money
from bakery.domain.repository.catalog_lookup import CatalogLookup
from bakery.domain.repository.delivery_fee_resolver import DeliveryFeeResolver
from bakery.domain.repository.order_store import LineItemStore, OrderStore
from bakery.domain.service.pricing import unit_price

logger = structlog.get_logger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SubmitOrderHandler:

    def __init__(
        self,
        cart: Cart,
        catalog: CatalogLookup,
        fee_resolver: DeliveryFeeResolver,
        order_store: OrderStore,
        line_store: LineItemStore,
        session: CustomerSession | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._cart = cart
        self._catalog = catalog
        self._fee_resolver = fee_resolver
        self._order_store = order_store
        self._line_store = line_store
        self._session = session
        self._clock = clock or _utcnow

    def handle(
        self,
        customer_id: int,
        fulfillment_mode: FulfillmentMode | str,
        notes: str | None = None,
        total: Money | Decimal | str | None = None,
    ) -> int:
        """Submit the cart as an order and return the new order ID.

        Args:
            customer_id: The logged-in customer.
            fulfillment_mode: ``DELIVERY`` or ``PICKUP`` (enum or name).
            notes: Free text for the bakery; blank is stored as absent.
            total: The amount shown to the customer (subtotal + fee).  If
                None, it is quoted from the current cart and catalog.
        """
        # One submission per cart at a time.
        with self._cart.lock:
            self._check_customer(customer_id)
            order_total = self._parse_total(total) if total is not None else None
            mode = FulfillmentMode.parse(fulfillment_mode)
            if self._cart.is_empty():
                raise EmptyCart("Cart is empty. Add items before checking out.")

            if order_total is None:
                quote = QuoteCheckoutHandler(
                    self._cart, self._catalog, self._fee_resolver
                ).handle(customer_id, mode)
                order_total = quote.total

            submission = Submission(
                customer_id=customer_id,
                mode=mode,
                total=order_total,
                notes=_normalize_notes(notes),
            )
            self._write_header(submission)
            self._write_lines(submission)

            submission.commit()
            self._cart.clear()
            logger.info(
                "Order submitted",
                order_id=submission.order_id,
                customer_id=customer_id,
                total=str(submission.total),
                lines=len(submission.lines_written),
                skipped=len(submission.lines_skipped),
            )
            return submission.order_id  # type: ignore[return-value]

    # --- Protocol steps -------------------------------------------------------

    def _write_header(self, submission: Submission) -> None:
        try:
            order_id = self._order_store.create_header(
                customer_id=submission.customer_id,
                created_at=self._clock(),
                total=submission.total,
                mode=submission.mode,
                notes=submission.notes,
            )
        except PersistenceFailure as exc:
            raise PersistenceFailure(str(exc), submission) from exc

        if order_id is None:
            raise PersistenceFailure("Could not create the order.", submission)
        submission.header_written(order_id)

    def _write_lines(self, submission: Submission) -> None:
        submission.start_lines()
        order_id = submission.order_id

        for product_id, quantity in self._cart.snapshot().items():
            try:
                record = self._catalog.find_by_id(product_id)
            except CatalogLookupError:
                self._abort(submission, product_id)
                raise

            if record is None:
                logger.warning(
                    "Skipping line for product no longer in catalog",
                    order_id=order_id,
                    product_id=product_id,
                )
                submission.line_skipped(product_id)
                continue

            try:
                written = self._line_store.create_line(
                    order_id=order_id,
                    product_id=product_id,
                    quantity=quantity,
                    price_at_moment=unit_price(record),
                )
            except PersistenceFailure as exc:
                self._abort(submission, product_id)
                raise PersistenceFailure(str(exc), submission) from exc

            if not written:
                self._abort(submission, product_id)
                raise PersistenceFailure("Could not save an order item.", submission)
            submission.line_written(product_id)

    @staticmethod
    def _abort(submission: Submission, product_id: str) -> None:
        submission.abort()
        logger.warning(
            "Order partially written",
            order_id=submission.order_id,
            failed_product_id=product_id,
            lines_written=len(submission.lines_written),
        )

    # --- Validation -----------------------------------------------------------

    def _check_customer(self, customer_id: int) -> None:
        if (
            not isinstance(customer_id, int)
            or isinstance(customer_id, bool)
            or customer_id <= 0
        ):
            raise Unauthenticated("Invalid customer. Please log in again.")
        if self._session is not None and not self._session.is_authenticated(customer_id):
            raise Unauthenticated("Invalid customer. Please log in again.")

    @staticmethod
    def _parse_total(total: Money | Decimal | str) -> Money:
        if isinstance(total, Money):
            return total
        try:
            return Money.of(total)
        except ValidationError as exc:
            raise InvalidTotal(f"Invalid order total: {total!r}") from exc


def _normalize_notes(notes: str | None) -> str | None:
    if notes is None or not notes.strip():
        return None
    return notes.strip()
