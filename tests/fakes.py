"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in a dict. No file I/O, no side effects.  They also
count calls so tests can assert how often a store was touched.
"""

from __future__ import annotations

from decimal import Decimal

from rootx.domain.exceptions import StoreError, ValidationError
from rootx.domain.model.color import Color
from rootx.domain.model.order import Order
from rootx.domain.model.product import Product
from rootx.domain.model.value_objects import Money
from rootx.domain.repository.color_repository import ColorRepository
from rootx.domain.repository.order_repository import OrderRepository
from rootx.domain.repository.product_repository import ProductRepository

WIDGET_ID = "64b7f0c2a1b2c3d4e5f60001"
GADGET_ID = "64b7f0c2a1b2c3d4e5f60002"
SCARF_ID = "64b7f0c2a1b2c3d4e5f60003"
MISSING_ID = "64b7f0c2a1b2c3d4e5f6ffff"


def make_product(
    product_id: str = WIDGET_ID,
    code: str = "W-1",
    title: str = "Widget",
    price: str = "100",
    discount: str | None = None,
    categories: list[str] | None = None,
    image_url: str | None = None,
) -> Product:
    return Product(
        id=product_id,
        code=code,
        title=title,
        price=Money(Decimal(price)),
        price_after_discount=Money(Decimal(discount)) if discount is not None else None,
        image_url=image_url,
        categories=list(categories or []),
    )


def default_catalog() -> list[Product]:
    return [
        make_product(WIDGET_ID, "W-1", "Widget", "100", "80", ["Gifts", "Clothing"], "w.png"),
        make_product(GADGET_ID, "G-1", "Gadget", "250"),
        make_product(SCARF_ID, "S-1", "Scarf", "40.50", categories=["Accessories"]),
    ]


class FakeOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._store: dict[str, Order] = {}
        self.save_calls = 0

    def get_by_id(self, order_id: str) -> Order | None:
        return self._store.get(order_id)

    def list_all(self) -> list[Order]:
        return sorted(self._store.values(), key=lambda o: o.created_at, reverse=True)

    def save(self, order: Order) -> None:
        self.save_calls += 1
        self._store[order.id] = order

    def delete(self, order_id: str) -> None:
        self._store.pop(order_id, None)


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[p.id] = p
        self.lookups: list[str] = []

    def get_by_id(self, product_id: str) -> Product | None:
        self.lookups.append(product_id)
        return self._store.get(product_id)

    def get_by_code(self, code: str) -> Product | None:
        for p in self._store.values():
            if p.code == code:
                return p
        return None

    def list_all(self) -> list[Product]:
        return sorted(self._store.values(), key=lambda p: p.created_at, reverse=True)

    def add(self, product: Product) -> None:
        if self.get_by_code(product.code) is not None:
            raise ValidationError("Product code must be unique")
        self._store[product.id] = product

    def save(self, product: Product) -> None:
        self._store[product.id] = product

    def delete(self, product_id: str) -> None:
        self._store.pop(product_id, None)


class FakeColorRepository(ColorRepository):

    def __init__(self) -> None:
        self._store: dict[str, Color] = {}

    def list_all(self) -> list[Color]:
        return sorted(self._store.values(), key=lambda c: c.created_at, reverse=True)

    def save(self, color: Color) -> None:
        self._store[color.id] = color


class BrokenOrderRepository(FakeOrderRepository):
    """Simulates an unreachable store."""

    def get_by_id(self, order_id: str) -> Order | None:
        raise StoreError("orders store unavailable")

    def list_all(self) -> list[Order]:
        raise StoreError("orders store unavailable")

    def save(self, order: Order) -> None:
        raise StoreError("orders store unavailable")
