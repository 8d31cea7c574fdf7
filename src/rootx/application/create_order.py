"""Application service: Create Order use case.

Orchestrates the flow between repositories and the domain model.
Pricing and snapshotting belong to the OrderPricingService; this handler
only decides when the result is written.  The write happens exactly once
and only after every line priced successfully, so a failed request
leaves the Order Store untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from rootx.domain.model.cart import CartLine, CustomerInfo
from rootx.domain.model.order import Order
from rootx.domain.repository.order_repository import OrderRepository
from rootx.domain.repository.product_repository import ProductRepository
from rootx.domain.service.order_pricing_service import OrderPricingService

logger = logging.getLogger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo

    def handle(
        self,
        cart: Sequence[CartLine] | None,
        customer_info: CustomerInfo | None = None,
    ) -> Order:
        """Price the cart against the current catalog and persist the order."""
        order = OrderPricingService(self._product_repo).price_order(cart, customer_info)
        self._order_repo.save(order)
        logger.info(
            "Order %s created: %d line(s), total %s",
            order.id,
            len(order.items),
            order.total_value,
        )
        return order
