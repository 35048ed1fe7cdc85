"""Domain value objects - immutable, schema-validated primitives."""

from decimal import Decimal

from pydantic import Field

from ..validation import DomainModel

CURRENCY_PATTERN = r"^[A-Z]{3}$"
MIN_QUANTITY = 1
MAX_QUANTITY = 100


class Money(DomainModel):
    """
    Immutable non-negative monetary value with currency.

    CRITICAL: Always use Decimal, never float! Ints, floats and numeric
    strings are coerced to Decimal on construction.
    """

    amount: Decimal = Field(ge=0)
    currency: str = Field(pattern=CURRENCY_PATTERN)

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    def __add__(self, other: "Money") -> "Money":
        """Add two Money objects (must have same currency)."""
        if self.currency != other.currency:
            raise ValueError(
                f"Cannot add different currencies: {self.currency} vs {other.currency}"
            )
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def multiply(self, quantity: int) -> "Money":
        return Money(amount=self.amount * quantity, currency=self.currency)

    def is_zero(self) -> bool:
        return self.amount == 0


class OrderItem(DomainModel):
    """Single order line: a product, how many, and the price of one."""

    product_id: str = Field(min_length=1)
    quantity: int = Field(ge=MIN_QUANTITY, le=MAX_QUANTITY, strict=True)
    unit_price: Money

    def subtotal(self) -> Money:
        """Line total: unit price times quantity."""
        return self.unit_price.multiply(self.quantity)
