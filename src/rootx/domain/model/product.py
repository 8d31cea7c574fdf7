"""Product aggregate.

Products live independently of orders. They have their own lifecycle:
prices change, products are added and removed from the catalog.
Orders never hold a reference to a live Product, only a snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from rootx.domain.exceptions import ValidationError
from rootx.domain.model.value_objects import Money, new_entity_id

ALLOWED_CATEGORIES = (
    "Best Selling",
    "New Arrivals",
    "Children Items",
    "Jewellery",
    "Accessories",
    "Gifts",
    "Clothing",
)

DEFAULT_SIZES = ("S", "M", "L", "XL", "XXL")


@dataclass
class Product:
    """A product in the catalog.

    Use ``Product.create()`` for new products.  The ``__init__`` is kept
    simple so the repository can reconstitute stored records as they are.
    """

    id: str
    code: str
    title: str
    price: Money
    price_after_discount: Money | None = None
    description: str | None = None
    image_url: str | None = None
    categories: list[str] = field(default_factory=list)
    sizes: list[str] = field(default_factory=lambda: list(DEFAULT_SIZES))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(
        code: str,
        title: str,
        price: Money,
        price_after_discount: Money | None = None,
        description: str | None = None,
        image_url: str | None = None,
        categories: list[str] | None = None,
        sizes: list[str] | None = None,
    ) -> Product:
        code = _required(code, "Product code")
        title = _required(title, "Product title")
        _check_discount(price, price_after_discount)
        return Product(
            id=new_entity_id(),
            code=code,
            title=title,
            price=price,
            price_after_discount=price_after_discount,
            description=description,
            image_url=image_url,
            categories=_checked_categories(categories or []),
            sizes=list(sizes) if sizes else list(DEFAULT_SIZES),
        )

    def update(
        self,
        *,
        code: str | None = None,
        title: str | None = None,
        price: Money | None = None,
        price_after_discount: Money | None = None,
        clear_discount: bool = False,
        description: str | None = None,
        image_url: str | None = None,
        categories: list[str] | None = None,
        sizes: list[str] | None = None,
    ) -> None:
        """Apply a partial revision.

        This does NOT affect any existing orders because orders
        capture a price snapshot at creation time.
        """
        if code is not None and code.strip() != self.code:
            raise ValidationError("Product code cannot be changed")

        new_price = price if price is not None else self.price
        if clear_discount:
            new_discount = None
        elif price_after_discount is not None:
            new_discount = price_after_discount
        else:
            new_discount = self.price_after_discount
        _check_discount(new_price, new_discount)

        if title is not None:
            self.title = _required(title, "Product title")
        if categories is not None:
            self.categories = _checked_categories(categories)
        if sizes is not None:
            self.sizes = list(sizes)
        if description is not None:
            self.description = description
        if image_url is not None:
            self.image_url = image_url
        self.price = new_price
        self.price_after_discount = new_discount

    def matches(self, search: str) -> bool:
        """Case-insensitive substring match over title, description and code."""
        needle = search.strip().lower()
        haystack = (self.title, self.description or "", self.code)
        return any(needle in text.lower() for text in haystack)


def _required(value: str | None, label: str) -> str:
    if value is None or not value.strip():
        raise ValidationError(f"{label} is required")
    return value.strip()


def _check_discount(price: Money, discount: Money | None) -> None:
    if discount is not None and discount > price:
        raise ValidationError(
            f"Discounted price {discount} cannot exceed price {price}"
        )


def _checked_categories(categories: list[str]) -> list[str]:
    invalid = [c for c in categories if c not in ALLOWED_CATEGORIES]
    if invalid:
        raise ValidationError(
            f"Invalid category found. Allowed: {', '.join(ALLOWED_CATEGORIES)}"
        )
    return list(categories)
