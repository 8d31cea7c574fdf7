"""Application service: Delete Order use case.  Orders are hard-deleted."""

from __future__ import annotations

import logging

from rootx.application.show_order import load_order
from rootx.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class DeleteOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str) -> None:
        order = load_order(self._order_repo, order_id)
        self._order_repo.delete(order.id)
        logger.info("Order %s deleted", order.id)
