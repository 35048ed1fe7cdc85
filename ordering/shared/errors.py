"""
Application error kinds.

Only two kinds exist:
- ValidationError: structural/schema violation (first failing message)
- DomainError: valid structure but illegal transition
"""
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class ValidationError:
    """Schema violation carrying the first failing message verbatim."""

    message: str

    @property
    def type(self) -> str:
        return "ValidationError"

    def __str__(self) -> str:
        return f"{self.type}: {self.message}"


@dataclass(frozen=True)
class DomainError:
    """Illegal state transition or missing aggregate."""

    message: str

    @property
    def type(self) -> str:
        return "DomainError"

    def __str__(self) -> str:
        return f"{self.type}: {self.message}"


AppError = Union[ValidationError, DomainError]


def validation_error(message: str) -> ValidationError:
    return ValidationError(message=message)


def domain_error(message: str) -> DomainError:
    return DomainError(message=message)
