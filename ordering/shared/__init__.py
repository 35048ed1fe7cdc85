"""Shared kernel - result type, error kinds and identifier aliases."""

from .errors import AppError, DomainError, ValidationError, domain_error, validation_error
from .result import Err, Ok, Result, UnwrapError
from .types import Clock, CustomerId, IdFactory, OrderId, utc_now

__all__ = [
    "AppError",
    "Clock",
    "CustomerId",
    "DomainError",
    "Err",
    "IdFactory",
    "Ok",
    "OrderId",
    "Result",
    "UnwrapError",
    "ValidationError",
    "domain_error",
    "utc_now",
    "validation_error",
]
