"""Application service: Show Order use case (query)."""

from __future__ import annotations

from rootx.domain.exceptions import NotFoundError, ValidationError
from rootx.domain.model.order import Order
from rootx.domain.model.value_objects import is_valid_entity_id
from rootx.domain.repository.order_repository import OrderRepository


def load_order(order_repo: OrderRepository, order_id: str) -> Order:
    """Fetch an order or raise the matching domain error."""
    if not is_valid_entity_id(order_id):
        raise ValidationError("Invalid order id")
    order = order_repo.get_by_id(order_id)
    if order is None:
        raise NotFoundError(f"Order {order_id} not found")
    return order


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str) -> Order:
        return load_order(self._order_repo, order_id)


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self) -> list[Order]:
        return sorted(self._order_repo.list_all(), key=lambda o: o.created_at, reverse=True)
