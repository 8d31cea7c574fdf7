"""Document layout shared by the JSON stores and the HTTP API.

Stored records and response bodies use the same camelCase shape with the
identifier under ``_id``, so existing clients and existing data keep
working.  Amounts are JSON numbers.
"""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

from rootx.domain.model.color import Color
from rootx.domain.model.order import CustomerDetails, Order, OrderLineItem, OrderStatus
from rootx.domain.model.product import DEFAULT_SIZES, Product
from rootx.domain.model.value_objects import Money, Quantity

# --- Products -----------------------------------------------------------------


def product_to_document(product: Product) -> dict[str, Any]:
    return {
        "_id": product.id,
        "title": product.title,
        "code": product.code,
        "description": product.description,
        "price": product.price.to_number(),
        "priceAfterDiscount": (
            product.price_after_discount.to_number()
            if product.price_after_discount is not None
            else None
        ),
        "imageUrl": product.image_url,
        "sizes": list(product.sizes),
        "categories": list(product.categories),
        "createdAt": _dump_datetime(product.created_at),
    }


def product_from_document(doc: dict[str, Any]) -> Product:
    discount = doc.get("priceAfterDiscount")
    return Product(
        id=doc["_id"],
        code=doc["code"],
        title=doc["title"],
        price=_money(doc["price"]),
        price_after_discount=_money(discount) if discount is not None else None,
        description=doc.get("description"),
        image_url=doc.get("imageUrl"),
        categories=list(doc.get("categories") or []),
        sizes=list(doc.get("sizes") or DEFAULT_SIZES),
        created_at=_load_datetime(doc.get("createdAt")),
    )


# --- Orders -------------------------------------------------------------------


def line_item_to_document(item: OrderLineItem) -> dict[str, Any]:
    return {
        "productId": item.product_id,
        "title": item.title,
        "code": item.code,
        "price": item.unit_price.to_number(),
        "quantity": item.quantity.value,
        "size": item.size,
        "color": item.color,
        "imageUrl": item.image_url,
        "category": item.category,
        "customFields": dict(item.custom_fields),
    }


def line_item_from_document(doc: dict[str, Any]) -> OrderLineItem:
    return OrderLineItem(
        product_id=doc["productId"],
        title=doc.get("title") or "",
        code=doc.get("code") or "",
        unit_price=_money(doc["price"]),
        quantity=Quantity(int(doc.get("quantity", 1))),
        size=doc.get("size"),
        color=doc.get("color") or "",
        image_url=doc.get("imageUrl") or "",
        category=doc.get("category"),
        custom_fields=dict(doc.get("customFields") or {}),
    )


def order_to_document(order: Order) -> dict[str, Any]:
    customer = order.customer
    return {
        "_id": order.id,
        "products": [line_item_to_document(item) for item in order.items],
        "customerName": customer.customer_name,
        "phone": customer.phone,
        "division": customer.division,
        "district": customer.district,
        "upazila": customer.upazila,
        "address": customer.address,
        "color": order.color,
        "totalValue": order.total_value.to_number(),
        "deliveryCharge": order.delivery_charge.to_number(),
        "status": order.status.value,
        "createdAt": _dump_datetime(order.created_at),
        "customFields": dict(order.custom_fields),
    }


def order_from_document(doc: dict[str, Any]) -> Order:
    # totalValue is derived from the line items, never read back
    return Order(
        id=doc["_id"],
        items=[line_item_from_document(raw) for raw in doc["products"]],
        customer=CustomerDetails(
            customer_name=doc.get("customerName"),
            phone=doc.get("phone"),
            division=doc.get("division"),
            district=doc.get("district"),
            upazila=doc.get("upazila"),
            address=doc.get("address"),
        ),
        color=doc.get("color") or "",
        delivery_charge=_money(doc.get("deliveryCharge") or 0),
        status=OrderStatus(doc.get("status", OrderStatus.PENDING.value)),
        created_at=_load_datetime(doc.get("createdAt")),
        custom_fields=dict(doc.get("customFields") or {}),
    )


# --- Colors -------------------------------------------------------------------


def color_to_document(color: Color) -> dict[str, Any]:
    return {
        "_id": color.id,
        "name": color.name,
        "hex": color.hex,
        "createdAt": _dump_datetime(color.created_at),
    }


def color_from_document(doc: dict[str, Any]) -> Color:
    return Color(
        id=doc["_id"],
        name=doc["name"],
        hex=doc.get("hex"),
        created_at=_load_datetime(doc.get("createdAt")),
    )


# --- Helpers ------------------------------------------------------------------


def _money(value: Any) -> Money:
    return Money(Decimal(str(value)))


def _dump_datetime(moment: datetime) -> str:
    return moment.isoformat()


def _load_datetime(raw: str | None) -> datetime:
    if not raw:
        return datetime.fromtimestamp(0, tz=timezone.utc)
    # records written elsewhere may end in "Z"
    moment = datetime.fromisoformat(raw.replace("Z", "+00:00"))
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment
