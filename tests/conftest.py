"""Shared fixtures: deterministic clock, id source and sample items."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import List
from uuid import UUID, uuid4

import pytest

from ordering.domain import Money, OrderItem

START_TIME = datetime(2026, 1, 13, 12, 0, 0, tzinfo=timezone.utc)


class FixedClock:
    """Clock that returns the same instant until advanced."""

    def __init__(self, now: datetime = START_TIME) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


class SequentialIds:
    """Id factory yielding predictable UUIDs: ...0001, ...0002, ..."""

    def __init__(self) -> None:
        self.issued: List[UUID] = []

    def __call__(self) -> UUID:
        value = UUID(int=len(self.issued) + 1)
        self.issued.append(value)
        return value


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def ids() -> SequentialIds:
    return SequentialIds()


@pytest.fixture
def customer_id() -> UUID:
    return uuid4()


@pytest.fixture
def jpy() -> Money:
    return Money(amount=Decimal("1000"), currency="JPY")


@pytest.fixture
def default_items(jpy: Money) -> List[OrderItem]:
    return [
        OrderItem(product_id="p1", quantity=2, unit_price=jpy),
        OrderItem(product_id="p2", quantity=1, unit_price=jpy),
    ]


@pytest.fixture
def make_items(jpy: Money):
    """Factory for `count` distinct items sharing one unit price."""

    def _make(count: int, quantity: int = 1, unit_price: Money = jpy) -> List[OrderItem]:
        return [
            OrderItem(product_id=f"p{i + 1}", quantity=quantity, unit_price=unit_price)
            for i in range(count)
        ]

    return _make
