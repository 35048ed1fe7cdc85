"""
In-memory Order Repository Implementation.

Used by tests and the demo. Storage lives for the lifetime of the instance.
"""
from typing import Dict, List, Optional
from uuid import UUID

from ordering.domain.entities.order import Order
from ordering.domain.repositories.order_repository import OrderRepository
from ordering.infrastructure.logging import get_logger
from ordering.shared.errors import AppError
from ordering.shared.result import Ok, Result
from ordering.shared.types import CustomerId, OrderId

logger = get_logger(__name__)


class InMemoryOrderRepository(OrderRepository):
    """
    In-memory implementation of OrderRepository.

    Stores orders in a dictionary keyed by order id. Saving an order that
    already exists replaces it and keeps its original position.
    """

    def __init__(self) -> None:
        self._storage: Dict[UUID, Order] = {}
        logger.debug("InMemoryOrderRepository initialized")

    async def save(self, order: Order) -> Result[Order, AppError]:
        self._storage[order.id] = order
        logger.info(f"Order saved: {order.id} (status: {order.status_type})")
        return Ok(order)

    async def find_by_id(self, order_id: OrderId) -> Result[Optional[Order], AppError]:
        order = self._storage.get(order_id)
        if order is None:
            logger.info(f"Order not found: {order_id}")
        return Ok(order)

    async def find_by_customer_id(self, customer_id: CustomerId) -> Result[List[Order], AppError]:
        orders = [
            order for order in self._storage.values()
            if order.customer_id == customer_id
        ]
        logger.debug(f"Found {len(orders)} order(s) for customer {customer_id}")
        return Ok(orders)

    def clear(self) -> None:
        """Clear all orders (for demo/testing)."""
        self._storage.clear()

    def size(self) -> int:
        return len(self._storage)
