"""Application layer - services and DTOs."""

from .dtos import MoneyDTO, OrderDTO, OrderItemDTO, OrderStatusDTO, order_from_dto
from .services import OrderApplicationService

__all__ = [
    # DTOs
    "MoneyDTO",
    "OrderDTO",
    "OrderItemDTO",
    "OrderStatusDTO",
    "order_from_dto",
    # Services
    "OrderApplicationService",
]
