"""HTTP request bodies.

Field names are snake_case in Python and camelCase on the wire.  Cart
fields that the pricing service interprets itself (``productId``,
``quantity``, ``color``, ``deliveryCharge``) are accepted as-is so that
their errors and defaults come from the domain, not from the parser.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from rootx.domain.model.cart import CartLine, CustomerInfo


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---- Orders ------------------------------------------------------------------


class CartLineIn(CamelModel):
    product_id: Any = None
    quantity: Any = None
    size: str | None = None
    color: Any = None
    category: str | None = None
    image_url: str | None = None
    custom_fields: dict[str, Any] | None = None

    def to_cart_line(self) -> CartLine:
        return CartLine(
            product_id=self.product_id,
            quantity=self.quantity,
            size=self.size,
            color=self.color,
            category=self.category,
            image_url=self.image_url,
            custom_fields=self.custom_fields or {},
        )


class OrderCreateRequest(CamelModel):
    products: list[CartLineIn] | None = None
    customer_name: str | None = None
    phone: str | None = None
    division: str | None = None
    district: str | None = None
    upazila: str | None = None
    address: str | None = None
    color: Any = None
    delivery_charge: Any = None
    custom_fields: dict[str, Any] | None = None

    def to_cart(self) -> list[CartLine] | None:
        if self.products is None:
            return None
        return [line.to_cart_line() for line in self.products]

    def to_customer_info(self) -> CustomerInfo:
        return CustomerInfo(
            customer_name=self.customer_name,
            phone=self.phone,
            division=self.division,
            district=self.district,
            upazila=self.upazila,
            address=self.address,
            color=self.color,
            delivery_charge=self.delivery_charge,
            custom_fields=self.custom_fields or {},
        )


class OrderUpdateRequest(CamelModel):
    """Only the fields present in the body are applied.

    Line items and the total are fixed at creation, so any other key is
    rejected.
    """

    model_config = ConfigDict(extra="forbid")

    customer_name: str | None = None
    phone: str | None = None
    division: str | None = None
    district: str | None = None
    upazila: str | None = None
    address: str | None = None
    color: Any = None
    delivery_charge: Any = None
    status: Any = None
    custom_fields: dict[str, Any] | None = None


class StatusUpdateRequest(BaseModel):
    status: Any = None


# ---- Products ----------------------------------------------------------------


class ProductCreateRequest(CamelModel):
    title: str
    code: str
    price: Decimal
    price_after_discount: Decimal | None = None
    description: str | None = None
    image_url: str | None = None
    categories: list[str] | None = None
    sizes: list[str] | None = None


class ProductUpdateRequest(CamelModel):
    title: str | None = None
    code: str | None = None
    price: Decimal | None = None
    price_after_discount: Decimal | None = None
    description: str | None = None
    image_url: str | None = None
    categories: list[str] | None = None
    sizes: list[str] | None = None


# ---- Colors ------------------------------------------------------------------


class ColorCreateRequest(BaseModel):
    name: str | None = None
    hex: str | None = None
