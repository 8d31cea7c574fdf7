"""Application service: Set Order Status use case.

Any status may follow any other; only membership in the status enum is
checked.  The status is validated before the order is loaded, so a bad
value never touches the stored order.
"""

from __future__ import annotations

import logging

from rootx.application.show_order import load_order
from rootx.domain.model.order import Order, OrderStatus
from rootx.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class SetOrderStatusHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str, status: object) -> Order:
        new_status = OrderStatus.parse(status)
        order = load_order(self._order_repo, order_id)

        previous = order.status
        order.set_status(new_status)
        self._order_repo.save(order)
        logger.info(
            "Order %s status %s -> %s", order.id, previous.value, new_status.value
        )
        return order
