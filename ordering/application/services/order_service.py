"""Application service for Order operations."""

import asyncio
from collections import defaultdict
from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable, Dict, List, Optional, Sequence, Union
from uuid import UUID, uuid4

from pydantic import TypeAdapter

from ordering.domain import functions
from ordering.domain.entities.order import Order
from ordering.domain.functions import ItemInput
from ordering.domain.repositories.order_repository import OrderRepository
from ordering.domain.validation import safe_parse
from ordering.infrastructure.logging import get_logger
from ordering.settings import OrderingSettings, get_settings
from ordering.shared.errors import AppError, domain_error
from ordering.shared.result import Err, Result
from ordering.shared.types import Clock, IdFactory, utc_now

logger = get_logger(__name__)

_UUIDAdapter: TypeAdapter = TypeAdapter(UUID)

Transition = Callable[[Order], Result[Order, AppError]]


class OrderApplicationService:
    """
    Application service for orchestrating order operations.

    Responsibilities:
    - Load orders from the repository before transitions
    - Delegate validation and state changes to the domain functions
    - Persist the resulting Order value
    - Serialize writes per order id
    """

    def __init__(
        self,
        repository: OrderRepository,
        settings: Optional[OrderingSettings] = None,
        clock: Clock = utc_now,
        id_factory: IdFactory = uuid4,
    ) -> None:
        """Initialize order application service.

        Args:
            repository: Order repository implementation
            settings: Application settings (cached settings when omitted)
            clock: Source of timestamps passed to the domain functions
            id_factory: Source of new order ids
        """
        self._repository = repository
        self._settings = settings or get_settings()
        self._clock = clock
        self._id_factory = id_factory
        self._locks: Dict[UUID, asyncio.Lock] = {}
        self._lock_holders: Dict[UUID, int] = defaultdict(int)

    async def create_order(
        self,
        customer_id: Union[UUID, str],
        items: Sequence[ItemInput],
    ) -> Result[Order, AppError]:
        """Create a DRAFT order and save it.

        Returns:
            Ok(saved Order), or Err(ValidationError) when the order is invalid
        """
        result = functions.create_order(
            customer_id,
            items,
            clock=self._clock,
            id_factory=self._id_factory,
            default_currency=self._settings.default_currency,
        )
        if result.is_err():
            logger.warning(f"Order creation rejected: {result.error}")
            return result

        order = result.value
        logger.info(f"Order created: {order.id} for customer {order.customer_id}")
        return await self._repository.save(order)

    async def place_order(self, order_id: Union[UUID, str], payment_id: str) -> Result[Order, AppError]:
        return await self._transition(
            order_id,
            "place",
            lambda order: functions.place_order(order, payment_id, clock=self._clock),
        )

    async def ship_order(self, order_id: Union[UUID, str], tracking_code: str) -> Result[Order, AppError]:
        return await self._transition(
            order_id,
            "ship",
            lambda order: functions.ship_order(order, tracking_code, clock=self._clock),
        )

    async def deliver_order(self, order_id: Union[UUID, str]) -> Result[Order, AppError]:
        return await self._transition(
            order_id,
            "deliver",
            lambda order: functions.deliver_order(order, clock=self._clock),
        )

    async def cancel_order(self, order_id: Union[UUID, str], reason: str) -> Result[Order, AppError]:
        return await self._transition(
            order_id,
            "cancel",
            lambda order: functions.cancel_order(order, reason, clock=self._clock),
        )

    async def get_order(self, order_id: Union[UUID, str]) -> Result[Order, AppError]:
        """Get order by ID; a missing order is a DomainError."""
        parsed = safe_parse(_UUIDAdapter, order_id, fallback="Invalid order id")
        if parsed.is_err():
            return parsed
        return await self._load(parsed.value)

    async def get_orders_by_customer(self, customer_id: Union[UUID, str]) -> Result[List[Order], AppError]:
        parsed = safe_parse(_UUIDAdapter, customer_id, fallback="Invalid customer id")
        if parsed.is_err():
            return parsed
        return await self._repository.find_by_customer_id(parsed.value)

    async def _transition(
        self,
        order_id: Union[UUID, str],
        action: str,
        transition: Transition,
    ) -> Result[Order, AppError]:
        """Load, transition and save one order under its lock."""
        parsed = safe_parse(_UUIDAdapter, order_id, fallback="Invalid order id")
        if parsed.is_err():
            return parsed
        key: UUID = parsed.value

        async with self._order_lock(key):
            loaded = await self._load(key)
            if loaded.is_err():
                return loaded

            result = transition(loaded.value)
            if result.is_err():
                logger.warning(f"Cannot {action} order {key}: {result.error}")
                return result

            order = result.value
            logger.info(f"Order {key} -> {order.status_type}")
            return await self._repository.save(order)

    async def _load(self, order_id: UUID) -> Result[Order, AppError]:
        found = await self._repository.find_by_id(order_id)
        if found.is_err():
            return found
        if found.value is None:
            return Err(domain_error(f"Order not found: {order_id}"))
        return found

    @asynccontextmanager
    async def _order_lock(self, order_id: UUID) -> AsyncIterator[None]:
        """Serialize work on one order; the lock is dropped once unused."""
        lock = self._locks.setdefault(order_id, asyncio.Lock())
        self._lock_holders[order_id] += 1
        try:
            async with lock:
                yield
        finally:
            self._lock_holders[order_id] -= 1
            if not self._lock_holders[order_id]:
                del self._lock_holders[order_id]
                del self._locks[order_id]
