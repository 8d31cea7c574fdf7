"""Cart input: what the client asked for, before any pricing.

Nothing here is persisted.  Values are kept raw (``quantity`` may be a
string, a number or missing) and only interpreted by the pricing service.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class CartLine:
    """One requested product line.  Note there is no price field."""

    product_id: Any
    quantity: Any = None
    size: str | None = None
    color: Any = None
    category: str | None = None
    image_url: str | None = None
    custom_fields: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class CustomerInfo:
    """Order-level fields supplied alongside the cart."""

    customer_name: str | None = None
    phone: str | None = None
    division: str | None = None
    district: str | None = None
    upazila: str | None = None
    address: str | None = None
    color: Any = None
    delivery_charge: Any = None
    custom_fields: dict[str, Any] = field(default_factory=dict)
