"""Application service: Quote Checkout use case (query).

Computes what the customer will be charged: the cart subtotal plus the
delivery fee of their area, or no fee at all for pickup.
"""

from __future__ import annotations

from bakery.application.dto import CheckoutQuoteDTO
from bakery.application.project_cart import ProjectCartHandler
from bakery.domain.model.cart import Cart
from bakery.domain.model.order import FulfillmentMode
from bakery.domain.model.value_objects import Money
from bakery.domain.repository.catalog_lookup import CatalogLookup
from bakery.domain.repository.delivery_fee_resolver import DeliveryFeeResolver


class QuoteCheckoutHandler:

    def __init__(
        self,
        cart: Cart,
        catalog: CatalogLookup,
        fee_resolver: DeliveryFeeResolver,
    ) -> None:
        self._projection = ProjectCartHandler(cart, catalog)
        self._fee_resolver = fee_resolver

    def handle(
        self, customer_id: int, mode: FulfillmentMode | str
    ) -> CheckoutQuoteDTO:
        mode = FulfillmentMode.parse(mode)
        view = self._projection.handle()

        if mode == FulfillmentMode.DELIVERY:
            fee = self._fee_resolver.fee_for(customer_id)
        else:
            fee = Money.zero()

        return CheckoutQuoteDTO(view=view, delivery_fee=fee, total=view.subtotal + fee)
