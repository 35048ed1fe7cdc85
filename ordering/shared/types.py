"""Identifier aliases and injectable effect signatures."""

from datetime import datetime, timezone
from typing import Callable, NewType
from uuid import UUID

# Nominal only: both are plain UUIDs at runtime.
OrderId = NewType("OrderId", UUID)
CustomerId = NewType("CustomerId", UUID)

Clock = Callable[[], datetime]
IdFactory = Callable[[], UUID]


def utc_now() -> datetime:
    """Wall-clock time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)
