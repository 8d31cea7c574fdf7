"""Order aggregate, the core of the domain.

The Order is an aggregate root that owns its line items.  Line items are
price snapshots taken at creation time and never change afterwards; only
the customer details, delivery charge, status and custom fields of an
order can be revised.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from rootx.domain.exceptions import ValidationError
from rootx.domain.model.value_objects import Money, Quantity, new_entity_id


class OrderStatus(Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    @staticmethod
    def parse(value: object) -> OrderStatus:
        if isinstance(value, OrderStatus):
            return value
        try:
            return OrderStatus(value)
        except ValueError:
            allowed = ", ".join(s.value for s in OrderStatus)
            raise ValidationError(
                f"Invalid status: {value!r}. Allowed: {allowed}"
            ) from None


@dataclass(frozen=True)
class OrderLineItem:
    """Captures the product data of a line at order-creation time."""

    product_id: str
    title: str
    code: str
    unit_price: Money  # locked at order-creation time
    quantity: Quantity
    size: str | None = None
    color: str = ""
    image_url: str = ""
    category: str | None = None
    custom_fields: dict[str, Any] = field(default_factory=dict)

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass(frozen=True)
class CustomerDetails:
    """Free-text contact and address fields; all optional."""

    customer_name: str | None = None
    phone: str | None = None
    division: str | None = None
    district: str | None = None
    upazila: str | None = None
    address: str | None = None

    @staticmethod
    def of(
        customer_name: str | None = None,
        phone: str | None = None,
        division: str | None = None,
        district: str | None = None,
        upazila: str | None = None,
        address: str | None = None,
    ) -> CustomerDetails:
        # address is the only field kept verbatim
        return CustomerDetails(
            customer_name=_trimmed(customer_name),
            phone=_trimmed(phone),
            division=_trimmed(division),
            district=_trimmed(district),
            upazila=_trimmed(upazila),
            address=address,
        )

    def revised(self, **changes: str | None) -> CustomerDetails:
        trimmed = {
            key: value if key == "address" else _trimmed(value)
            for key, value in changes.items()
        }
        return replace(self, **trimmed)


def _trimmed(value: str | None) -> str | None:
    return value.strip() if value is not None else None


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use the ``Order.create()`` factory for new orders; it enforces all
    business rules.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders without re-validating.
    """

    id: str
    items: list[OrderLineItem]
    customer: CustomerDetails = field(default_factory=CustomerDetails)
    color: str = ""
    delivery_charge: Money = field(default_factory=Money.zero)
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    custom_fields: dict[str, Any] = field(default_factory=dict)

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        items: list[OrderLineItem],
        customer: CustomerDetails | None = None,
        color: str = "",
        delivery_charge: Money | None = None,
        custom_fields: dict[str, Any] | None = None,
    ) -> Order:
        """Create a new pending order, enforcing all invariants."""
        if not items:
            raise ValidationError("Order must contain at least one item")

        return Order(
            id=new_entity_id(),
            items=list(items),
            customer=customer or CustomerDetails(),
            color=color,
            delivery_charge=delivery_charge or Money.zero(),
            custom_fields=dict(custom_fields or {}),
        )

    # --- State transitions ----------------------------------------------------

    def set_status(self, status: OrderStatus) -> None:
        """Move to any status.  There is no transition graph."""
        self.status = status

    def revise(
        self,
        customer: CustomerDetails | None = None,
        color: str | None = None,
        delivery_charge: Money | None = None,
        status: OrderStatus | None = None,
        custom_fields: dict[str, Any] | None = None,
    ) -> None:
        """Replace the mutable details.  Line items and total never change."""
        if customer is not None:
            self.customer = customer
        if color is not None:
            self.color = color
        if delivery_charge is not None:
            self.delivery_charge = delivery_charge
        if status is not None:
            self.status = status
        if custom_fields is not None:
            self.custom_fields = dict(custom_fields)

    # --- Computed properties --------------------------------------------------

    @property
    def total_value(self) -> Money:
        result = Money.zero()
        for item in self.items:
            result = result + item.line_total
        return result
