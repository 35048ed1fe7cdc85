"""Repository interfaces for Order aggregate."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ordering.shared.errors import AppError
from ordering.shared.result import Result
from ordering.shared.types import CustomerId, OrderId

from ..entities.order import Order


class OrderRepository(ABC):
    """Abstract repository for Order aggregate persistence."""

    @abstractmethod
    async def save(self, order: Order) -> Result[Order, AppError]:
        """Persist order aggregate, replacing any previous version.

        Args:
            order: Order aggregate to persist

        Returns:
            Ok(saved order) or Err(AppError)
        """

    @abstractmethod
    async def find_by_id(self, order_id: OrderId) -> Result[Optional[Order], AppError]:
        """Retrieve order by unique identifier.

        Args:
            order_id: Order UUID

        Returns:
            Ok(Order) if found, Ok(None) otherwise
        """

    @abstractmethod
    async def find_by_customer_id(self, customer_id: CustomerId) -> Result[List[Order], AppError]:
        """List a customer's orders in insertion order.

        Args:
            customer_id: Customer UUID

        Returns:
            Ok(list of orders), empty when the customer has none
        """
