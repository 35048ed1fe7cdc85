"""Domain entities."""

from .order import MAX_ITEMS, MIN_ITEMS, Order, can_be_cancelled, sum_item_amounts
from .order_status import (
    MIN_CANCEL_REASON_LENGTH,
    Cancelled,
    Delivered,
    Draft,
    OrderStatus,
    OrderStatusAdapter,
    OrderStatusFactory,
    OrderStatusType,
    Placed,
    Shipped,
    is_draft,
    is_placed,
    is_shipped,
)

__all__ = [
    "Cancelled",
    "Delivered",
    "Draft",
    "MAX_ITEMS",
    "MIN_CANCEL_REASON_LENGTH",
    "MIN_ITEMS",
    "Order",
    "OrderStatus",
    "OrderStatusAdapter",
    "OrderStatusFactory",
    "OrderStatusType",
    "Placed",
    "Shipped",
    "can_be_cancelled",
    "is_draft",
    "is_placed",
    "is_shipped",
    "sum_item_amounts",
]
