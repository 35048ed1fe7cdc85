"""Application DTOs."""

from .order_dto import MoneyDTO, OrderDTO, OrderItemDTO, OrderStatusDTO, order_from_dto

__all__ = ["MoneyDTO", "OrderDTO", "OrderItemDTO", "OrderStatusDTO", "order_from_dto"]
