"""Domain layer - pure domain models, functions and interfaces."""

from .entities import (
    Cancelled,
    Delivered,
    Draft,
    Order,
    OrderStatus,
    OrderStatusFactory,
    OrderStatusType,
    Placed,
    Shipped,
    can_be_cancelled,
)
from .functions import (
    calculate_total_amount,
    cancel_order,
    create_money,
    create_order,
    create_order_item,
    deliver_order,
    place_order,
    ship_order,
)
from .repositories import OrderRepository
from .value_objects import Money, OrderItem

__all__ = [
    "Cancelled",
    "Delivered",
    "Draft",
    "Money",
    "Order",
    "OrderItem",
    "OrderRepository",
    "OrderStatus",
    "OrderStatusFactory",
    "OrderStatusType",
    "Placed",
    "Shipped",
    "calculate_total_amount",
    "can_be_cancelled",
    "cancel_order",
    "create_money",
    "create_order",
    "create_order_item",
    "deliver_order",
    "place_order",
    "ship_order",
]
