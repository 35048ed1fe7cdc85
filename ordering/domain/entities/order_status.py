"""
Order lifecycle status as a tagged union.

Each variant carries only the fields that belong to its state, so illegal
combinations (a DRAFT with a tracking code, a CANCELLED without a reason)
cannot be represented. The `type` field is the discriminator.

    DRAFT -> PLACED -> SHIPPED -> DELIVERED
      |        |
      +--------+--> CANCELLED
"""
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import AwareDatetime, Field, TypeAdapter

from ordering.shared.errors import ValidationError
from ordering.shared.result import Result
from ordering.shared.types import Clock, utc_now

from ..validation import DomainModel, safe_parse

MIN_CANCEL_REASON_LENGTH = 5


class OrderStatusType(str, Enum):
    DRAFT = "DRAFT"
    PLACED = "PLACED"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


class Draft(DomainModel):
    type: Literal["DRAFT"] = "DRAFT"
    created_at: AwareDatetime


class Placed(DomainModel):
    type: Literal["PLACED"] = "PLACED"
    placed_at: AwareDatetime
    payment_id: str = Field(min_length=1)


class Shipped(DomainModel):
    type: Literal["SHIPPED"] = "SHIPPED"
    shipped_at: AwareDatetime
    tracking_code: str = Field(min_length=1)


class Delivered(DomainModel):
    type: Literal["DELIVERED"] = "DELIVERED"
    delivered_at: AwareDatetime


class Cancelled(DomainModel):
    type: Literal["CANCELLED"] = "CANCELLED"
    cancelled_at: AwareDatetime
    reason: str = Field(min_length=MIN_CANCEL_REASON_LENGTH)


OrderStatus = Annotated[
    Union[Draft, Placed, Shipped, Delivered, Cancelled],
    Field(discriminator="type"),
]

OrderStatusAdapter: TypeAdapter = TypeAdapter(OrderStatus)


def is_draft(status: OrderStatus) -> bool:
    return status.type == OrderStatusType.DRAFT.value


def is_placed(status: OrderStatus) -> bool:
    return status.type == OrderStatusType.PLACED.value


def is_shipped(status: OrderStatus) -> bool:
    return status.type == OrderStatusType.SHIPPED.value


class OrderStatusFactory:
    """
    Builds status values for each lifecycle state.

    Every constructor stamps the transition time from the injected clock.
    Constructors with required fields validate them through the status
    schema and return a Result carrying the first violation on failure;
    no partial status is ever returned.
    """

    def __init__(self, clock: Clock = utc_now) -> None:
        self._clock = clock

    def draft(self) -> Draft:
        """Initial status. Requires a timezone-aware clock.

        Raises:
            pydantic.ValidationError: If the clock returns a naive datetime
        """
        return Draft(created_at=self._clock())

    def placed(self, payment_id: str) -> Result[OrderStatus, ValidationError]:
        return self._parse({
            "type": OrderStatusType.PLACED.value,
            "placed_at": self._clock(),
            "payment_id": payment_id,
        })

    def shipped(self, tracking_code: str) -> Result[OrderStatus, ValidationError]:
        return self._parse({
            "type": OrderStatusType.SHIPPED.value,
            "shipped_at": self._clock(),
            "tracking_code": tracking_code,
        })

    def delivered(self) -> Result[OrderStatus, ValidationError]:
        return self._parse({
            "type": OrderStatusType.DELIVERED.value,
            "delivered_at": self._clock(),
        })

    def cancelled(self, reason: str) -> Result[OrderStatus, ValidationError]:
        return self._parse({
            "type": OrderStatusType.CANCELLED.value,
            "cancelled_at": self._clock(),
            "reason": reason,
        })

    @staticmethod
    def _parse(data: dict) -> Result[OrderStatus, ValidationError]:
        return safe_parse(OrderStatusAdapter, data, fallback="Invalid status")
