"""
Order aggregate root.

The Order is the unit of consistency: every transition builds a complete
candidate Order and validates it as a whole. Orders are never mutated in
place; a transition returns a new value.

Invariants enforced by the schema:
- 1 to 10 items
- updated_at >= created_at
- total_amount equals the sum of item subtotals
"""
from decimal import Decimal
from typing import Iterable, Tuple
from uuid import UUID

from pydantic import AwareDatetime, Field, model_validator

from ..validation import DomainModel
from ..value_objects import Money, OrderItem
from .order_status import OrderStatus, is_draft, is_placed

MIN_ITEMS = 1
MAX_ITEMS = 10


def sum_item_amounts(items: Iterable[OrderItem]) -> Decimal:
    """Sum of quantity * unit price across items, ignoring currency."""
    return sum(
        (item.unit_price.amount * item.quantity for item in items),
        Decimal("0"),
    )


class Order(DomainModel):
    """Order aggregate root."""

    id: UUID
    customer_id: UUID
    items: Tuple[OrderItem, ...] = Field(min_length=MIN_ITEMS, max_length=MAX_ITEMS)
    status: OrderStatus
    total_amount: Money
    created_at: AwareDatetime
    updated_at: AwareDatetime

    @model_validator(mode="after")
    def check_invariants(self) -> "Order":
        if self.updated_at < self.created_at:
            raise ValueError("updated_at must not be earlier than created_at")
        # Currency is not compared: the total takes the first item's currency.
        if self.total_amount.amount != sum_item_amounts(self.items):
            raise ValueError("total_amount must equal the sum of item subtotals")
        return self

    @property
    def status_type(self) -> str:
        return self.status.type


def can_be_cancelled(order: Order) -> bool:
    """Business rule: only DRAFT or PLACED orders can be cancelled."""
    return is_draft(order.status) or is_placed(order.status)
