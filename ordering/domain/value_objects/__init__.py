"""Domain value objects."""

from .value_objects import CURRENCY_PATTERN, MAX_QUANTITY, MIN_QUANTITY, Money, OrderItem

__all__ = [
    "CURRENCY_PATTERN",
    "MAX_QUANTITY",
    "MIN_QUANTITY",
    "Money",
    "OrderItem",
]
