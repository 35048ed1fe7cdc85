"""
Pure domain functions for the order lifecycle.

Every function here is total: invalid input produces an Err, never an
exception. The only effects are reading the clock and generating ids,
both injectable so results are deterministic under test.
"""
from datetime import datetime
from decimal import Decimal
from typing import Any, Callable, Mapping, Sequence, Tuple, Union
from uuid import UUID, uuid4

from pydantic import TypeAdapter

from ordering.shared.errors import AppError, ValidationError, domain_error
from ordering.shared.result import Err, Result
from ordering.shared.types import Clock, IdFactory, utc_now

from .entities import (
    Order,
    OrderStatus,
    OrderStatusFactory,
    OrderStatusType,
    can_be_cancelled,
    is_draft,
    is_placed,
    is_shipped,
    sum_item_amounts,
)
from .validation import safe_parse
from .value_objects import Money, OrderItem

DEFAULT_CURRENCY = "JPY"

ItemInput = Union[OrderItem, Mapping[str, Any]]

_ItemsAdapter: TypeAdapter = TypeAdapter(Tuple[OrderItem, ...])


# =========================================================================
# VALUE OBJECT CONSTRUCTION
# =========================================================================

def create_money(amount: Union[Decimal, int, float, str], currency: str) -> Result[Money, ValidationError]:
    """Build Money, failing with the first schema violation."""
    return safe_parse(
        Money, {"amount": amount, "currency": currency}, fallback="Invalid money"
    )


def create_order_item(
    product_id: str,
    quantity: int,
    unit_price: Union[Money, Mapping[str, Any]],
) -> Result[OrderItem, ValidationError]:
    """Build an OrderItem, failing with the first schema violation."""
    return safe_parse(
        OrderItem,
        {"product_id": product_id, "quantity": quantity, "unit_price": unit_price},
        fallback="Invalid order item",
    )


# =========================================================================
# BUSINESS LOGIC
# =========================================================================

def calculate_total_amount(
    items: Sequence[OrderItem],
    default_currency: str = DEFAULT_CURRENCY,
) -> Money:
    """
    Sum quantity * unit price over all items.

    The currency comes from the first item only; items in other currencies
    are summed as-is. An empty list totals zero in default_currency.
    """
    currency = items[0].unit_price.currency if items else default_currency
    return Money(amount=sum_item_amounts(items), currency=currency)


def create_order(
    customer_id: Union[UUID, str],
    items: Sequence[ItemInput],
    *,
    clock: Clock = utc_now,
    id_factory: IdFactory = uuid4,
    default_currency: str = DEFAULT_CURRENCY,
) -> Result[Order, AppError]:
    """
    Create a new DRAFT order.

    The candidate aggregate is validated as a whole; the first violation
    (item count, item fields, money format, ids) is returned as a
    ValidationError and no order is produced.

    Args:
        customer_id: Customer UUID
        items: OrderItem values (or raw mappings, validated by the schema)
        clock: Source of the creation timestamp
        id_factory: Source of the new order id
        default_currency: Currency of the total when items is empty

    Returns:
        Ok(Order) in DRAFT status, or Err(ValidationError)
    """
    now = clock()
    parsed_items = safe_parse(_ItemsAdapter, items)
    if parsed_items.is_ok():
        item_values = list(parsed_items.value)
        currency = item_values[0].unit_price.currency if item_values else default_currency
        total: Any = {"amount": sum_item_amounts(item_values), "currency": currency}
        candidate_items: Any = item_values
    else:
        # Let the full schema report the violation in field order.
        total = {"amount": Decimal("0"), "currency": default_currency}
        candidate_items = items

    candidate = {
        "id": id_factory(),
        "customer_id": customer_id,
        "items": candidate_items,
        "status": {"type": OrderStatusType.DRAFT.value, "created_at": now},
        "total_amount": total,
        "created_at": now,
        "updated_at": now,
    }
    return safe_parse(Order, candidate, fallback="Invalid order")


# =========================================================================
# STATE TRANSITIONS
# =========================================================================

def place_order(
    order: Order,
    payment_id: str,
    *,
    clock: Clock = utc_now,
) -> Result[Order, AppError]:
    """DRAFT -> PLACED."""
    if not is_draft(order.status):
        return Err(domain_error(
            f"Only DRAFT orders can be placed. Current status: {order.status.type}"
        ))
    return _transition(order, clock, lambda statuses: statuses.placed(payment_id))


def ship_order(
    order: Order,
    tracking_code: str,
    *,
    clock: Clock = utc_now,
) -> Result[Order, AppError]:
    """PLACED -> SHIPPED."""
    if not is_placed(order.status):
        return Err(domain_error(
            f"Only PLACED orders can be shipped. Current status: {order.status.type}"
        ))
    return _transition(order, clock, lambda statuses: statuses.shipped(tracking_code))


def deliver_order(
    order: Order,
    *,
    clock: Clock = utc_now,
) -> Result[Order, AppError]:
    """SHIPPED -> DELIVERED."""
    if not is_shipped(order.status):
        return Err(domain_error(
            f"Only SHIPPED orders can be delivered. Current status: {order.status.type}"
        ))
    return _transition(order, clock, lambda statuses: statuses.delivered())


def cancel_order(
    order: Order,
    reason: str,
    *,
    clock: Clock = utc_now,
) -> Result[Order, AppError]:
    """DRAFT or PLACED -> CANCELLED."""
    if not can_be_cancelled(order):
        return Err(domain_error(
            f"Order cannot be cancelled. Current status: {order.status.type}"
        ))
    return _transition(order, clock, lambda statuses: statuses.cancelled(reason))


def _transition(
    order: Order,
    clock: Clock,
    build_status: Callable[[OrderStatusFactory], Result[OrderStatus, ValidationError]],
) -> Result[Order, AppError]:
    """Build the new status, then re-validate the whole candidate aggregate."""
    now: datetime = clock()
    status_result = build_status(OrderStatusFactory(lambda: now))
    if status_result.is_err():
        return status_result

    candidate = {**dict(order), "status": status_result.value, "updated_at": now}
    return safe_parse(Order, candidate, fallback="Invalid order")
