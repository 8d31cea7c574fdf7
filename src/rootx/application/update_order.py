"""Application service: Update Order use case.

Merges the supplied detail fields into a stored order.  Only the fields
named in ``EDITABLE_FIELDS`` may change; the line items and the total
value are fixed at creation.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from rootx.application.show_order import load_order
from rootx.domain.exceptions import ValidationError
from rootx.domain.model.order import Order, OrderStatus
from rootx.domain.repository.order_repository import OrderRepository
from rootx.domain.service.order_pricing_service import (
    normalize_color,
    parse_delivery_charge,
)

CUSTOMER_FIELDS = (
    "customer_name",
    "phone",
    "division",
    "district",
    "upazila",
    "address",
)
EDITABLE_FIELDS = CUSTOMER_FIELDS + (
    "color",
    "delivery_charge",
    "status",
    "custom_fields",
)


class UpdateOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str, changes: Mapping[str, Any]) -> Order:
        unknown = sorted(set(changes) - set(EDITABLE_FIELDS))
        if unknown:
            raise ValidationError(f"Cannot update field(s): {', '.join(unknown)}")

        # Parse everything before loading so a bad value changes nothing
        status = OrderStatus.parse(changes["status"]) if "status" in changes else None
        delivery_charge = (
            parse_delivery_charge(changes["delivery_charge"])
            if "delivery_charge" in changes
            else None
        )
        color = normalize_color(changes["color"]) if "color" in changes else None
        custom_fields = changes.get("custom_fields")

        order = load_order(self._order_repo, order_id)
        customer_changes = {k: changes[k] for k in CUSTOMER_FIELDS if k in changes}
        order.revise(
            customer=order.customer.revised(**customer_changes) if customer_changes else None,
            color=color,
            delivery_charge=delivery_charge,
            status=status,
            custom_fields=custom_fields,
        )
        self._order_repo.save(order)
        return order
