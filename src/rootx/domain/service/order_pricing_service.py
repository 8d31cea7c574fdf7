"""Domain service: Order Pricing.

Turns an unpriced cart into a priced, denormalized Order.  Unit prices
always come from the catalog as it stands at this instant; nothing the
client sends is ever used as a price or a total.

Validation runs in two phases so that nothing is half-built:
  Phase 1: the cart is non-empty and every product id is well formed.
            No catalog access happens before this passes.
  Phase 2: each line is resolved against the catalog and snapshotted,
            in input order.  The first missing product aborts the lot.

The resulting Order is NOT persisted here; the caller saves it once.
"""

from __future__ import annotations

from collections.abc import Sequence

from rootx.domain.exceptions import NotFoundError, ValidationError
from rootx.domain.model.cart import CartLine, CustomerInfo
from rootx.domain.model.order import CustomerDetails, Order, OrderLineItem
from rootx.domain.model.product import Product
from rootx.domain.model.value_objects import Money, Quantity, is_valid_entity_id
from rootx.domain.repository.product_repository import ProductRepository


class OrderPricingService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def price_order(
        self,
        cart: Sequence[CartLine] | None,
        customer_info: CustomerInfo | None = None,
    ) -> Order:
        info = customer_info or CustomerInfo()

        # Phase 1: shape checks, no I/O
        if not cart:
            raise ValidationError("Products are required")
        for line in cart:
            if not is_valid_entity_id(line.product_id):
                raise ValidationError(f"Invalid productId: {line.product_id}")
        delivery_charge = parse_delivery_charge(info.delivery_charge)

        # Phase 2: resolve and snapshot, one catalog read per distinct id
        resolved: dict[str, Product] = {}
        items: list[OrderLineItem] = []
        for line in cart:
            product = resolved.get(line.product_id)
            if product is None:
                product = self._product_repo.get_by_id(line.product_id)
                if product is None:
                    raise NotFoundError(f"Product {line.product_id} not found")
                resolved[line.product_id] = product
            items.append(snapshot_line_item(line, product))

        return Order.create(
            items=items,
            customer=CustomerDetails.of(
                customer_name=info.customer_name,
                phone=info.phone,
                division=info.division,
                district=info.district,
                upazila=info.upazila,
                address=info.address,
            ),
            color=normalize_color(info.color),
            delivery_charge=delivery_charge,
            custom_fields=info.custom_fields,
        )


# ---------------------------------------------------------------------------
# Precedence rules
# ---------------------------------------------------------------------------


def resolve_unit_price(product: Product) -> Money:
    """The discounted price when the product has one, else the list price."""
    if product.price_after_discount is not None:
        return product.price_after_discount
    return product.price


def resolve_category(line: CartLine, product: Product) -> str | None:
    """Cart override, else the product's first category, else None."""
    if line.category:
        return line.category
    if product.categories:
        return product.categories[0]
    return None


def resolve_image_url(line: CartLine, product: Product) -> str:
    """Cart override, else the product's image, else an empty string."""
    return line.image_url or product.image_url or ""


def normalize_color(raw: object) -> str:
    if raw is None:
        return ""
    return str(raw).strip()


def parse_delivery_charge(raw: object) -> Money:
    """Missing, empty and zero charges are all free delivery."""
    if raw is None or raw == "" or raw == 0:
        return Money.zero()
    return Money.of(raw)  # type: ignore[arg-type]


def snapshot_line_item(line: CartLine, product: Product) -> OrderLineItem:
    return OrderLineItem(
        product_id=product.id,
        title=product.title,
        code=product.code,
        unit_price=resolve_unit_price(product),
        quantity=Quantity.normalize(line.quantity),
        size=line.size or None,
        color=normalize_color(line.color),
        image_url=resolve_image_url(line, product),
        category=resolve_category(line, product),
        custom_fields=dict(line.custom_fields or {}),
    )
