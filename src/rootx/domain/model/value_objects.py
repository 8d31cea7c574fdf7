"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from bson import ObjectId

from rootx.domain.exceptions import ValidationError


def new_entity_id() -> str:
    """Generate a fresh ObjectId string for a new entity."""
    return str(ObjectId())


def is_valid_entity_id(value: object) -> bool:
    return isinstance(value, str) and ObjectId.is_valid(value)


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount.

    Uses Decimal so that order totals are exact sums of the line totals.
    No rounding is applied anywhere.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + other.amount)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor)

    def __lt__(self, other: Money) -> bool:
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        return self.amount >= other.amount

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.amount:.2f}"

    def to_number(self) -> int | float:
        """JSON-friendly number: an int when the amount is integral."""
        if self.amount == self.amount.to_integral_value():
            return int(self.amount)
        return float(self.amount)

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        if isinstance(amount, bool):
            raise ValidationError(f"Invalid money amount: {amount!r}")
        try:
            return Money(Decimal(str(amount).strip()))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity."""

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)

    @staticmethod
    def normalize(raw: object) -> Quantity:
        """Interpret a client-supplied quantity.

        Missing, non-numeric, non-finite and zero values all mean one unit.
        Negative or fractional numbers are rejected.
        """
        if raw is None or isinstance(raw, bool):
            return Quantity(1)
        try:
            value = Decimal(str(raw).strip())
        except (InvalidOperation, ValueError):
            return Quantity(1)
        if not value.is_finite() or value == 0:
            return Quantity(1)
        if value != value.to_integral_value():
            raise ValidationError(f"Quantity must be a whole number, got {raw!r}")
        return Quantity(int(value))
