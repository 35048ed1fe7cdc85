"""
End-to-End Demo: Order lifecycle

This demonstrates the complete workflow:
1. Build money and order items
2. Create an order (DRAFT)
3. Place it with a payment id (PLACED)
4. Create and cancel a second order (CANCELLED)
5. Try an illegal transition and show the DomainError
6. List the customer's orders

Uses the in-memory repository (no database needed).
"""
import asyncio
import logging
import sys
from uuid import uuid4

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

from ordering.application import OrderApplicationService, OrderDTO
from ordering.domain import OrderItem, create_money
from ordering.infrastructure.persistence import InMemoryOrderRepository


def print_order(title: str, order) -> None:
    print(f"\n{title}")
    print(f"- Order ID: {order.id}")
    print(f"- Status: {order.status_type}")
    print(f"- Total: {order.total_amount}")
    print(f"- Items: {len(order.items)}")


async def run_demo() -> int:
    """Run the demo; returns a process exit code."""

    print("\n" + "=" * 80)
    print("DEMO: Order lifecycle")
    print("=" * 80)

    repository = InMemoryOrderRepository()
    service = OrderApplicationService(repository)
    customer_id = uuid4()

    # =========================================================================
    # BUILD VALUE OBJECTS
    # =========================================================================
    money = create_money(1000, "JPY")
    if money.is_err():
        print(f"Money creation failed: {money.error.message}")
        return 1

    items = [
        OrderItem(product_id="p1", quantity=2, unit_price=money.value),
        OrderItem(product_id="p2", quantity=1, unit_price=money.value),
    ]

    # =========================================================================
    # CREATE + PLACE
    # =========================================================================
    created = await service.create_order(customer_id, items)
    if created.is_err():
        print(f"Order creation failed: {created.error}")
        return 1
    print_order("Order created:", created.value)

    placed = await service.place_order(created.value.id, "payment-456")
    if placed.is_err():
        print(f"Order placement failed: {placed.error}")
        return 1
    print_order("Order placed:", placed.value)
    print(f"- Payment ID: {placed.value.status.payment_id}")

    # =========================================================================
    # CANCEL A SECOND ORDER
    # =========================================================================
    second = await service.create_order(customer_id, items[:1])
    if second.is_err():
        print(f"Order creation failed: {second.error}")
        return 1
    cancelled = await service.cancel_order(second.value.id, "Customer request")
    if cancelled.is_err():
        print(f"Order cancellation failed: {cancelled.error}")
        return 1
    print_order("Order cancelled:", cancelled.value)
    print(f"- Reason: {cancelled.value.status.reason}")

    # =========================================================================
    # ILLEGAL TRANSITION
    # =========================================================================
    again = await service.place_order(created.value.id, "payment-789")
    if again.is_err():
        print(f"\nPlacing the order twice is rejected: {again.error}")

    # =========================================================================
    # LIST
    # =========================================================================
    listed = await service.get_orders_by_customer(customer_id)
    if listed.is_err():
        print(f"Listing failed: {listed.error}")
        return 1
    print(f"\nCustomer {customer_id} has {len(listed.value)} order(s):")
    for order in listed.value:
        print(OrderDTO.from_domain(order).to_json(indent=2))

    print("\nDemo complete")
    return 0


def main() -> None:
    sys.exit(asyncio.run(run_demo()))


if __name__ == "__main__":
    main()
