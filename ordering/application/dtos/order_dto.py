"""Application DTOs for Order serialization.

Orders are flattened field-for-field with ISO-8601 timestamps and UUID
strings. The status keeps its tagged-union shape.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from ordering.domain.entities.order import Order
from ordering.domain.validation import safe_parse
from ordering.shared.errors import ValidationError
from ordering.shared.result import Result


class MoneyDTO(BaseModel):
    """DTO for a monetary amount."""

    amount: str = Field(..., description="Decimal amount as text")
    currency: str = Field(..., description="ISO 4217 currency code")

    model_config = {"frozen": True}


class OrderItemDTO(BaseModel):
    """DTO for order item."""

    product_id: str = Field(..., description="Product identifier")
    quantity: int = Field(..., description="Quantity ordered")
    unit_price: MoneyDTO

    model_config = {"frozen": True}


class OrderStatusDTO(BaseModel):
    """DTO for the status; only the active variant's fields are set."""

    type: str = Field(..., description="Status discriminator")
    created_at: Optional[str] = None
    placed_at: Optional[str] = None
    payment_id: Optional[str] = None
    shipped_at: Optional[str] = None
    tracking_code: Optional[str] = None
    delivered_at: Optional[str] = None
    cancelled_at: Optional[str] = None
    reason: Optional[str] = None

    model_config = {"frozen": True}


class OrderDTO(BaseModel):
    """Response DTO for order details."""

    id: str = Field(..., description="Order UUID")
    customer_id: str = Field(..., description="Customer UUID")
    items: List[OrderItemDTO] = Field(default_factory=list, description="Order items")
    status: OrderStatusDTO
    total_amount: MoneyDTO
    created_at: str = Field(..., description="ISO-8601 creation time")
    updated_at: str = Field(..., description="ISO-8601 last update time")

    model_config = {"frozen": True}

    @classmethod
    def from_domain(cls, order: Order) -> "OrderDTO":
        """Transform Order domain entity to OrderDTO."""
        data = order.model_dump(mode="json")
        return cls.model_validate(data)

    def to_json(self, indent: Optional[int] = None) -> str:
        return self.model_dump_json(indent=indent, exclude_none=True)


def order_from_dto(dto: OrderDTO) -> Result[Order, ValidationError]:
    """Rebuild a validated Order from its DTO."""
    data: Dict[str, Any] = dto.model_dump(exclude_none=True)
    return safe_parse(Order, data, fallback="Invalid order")
