"""
Schema validation helpers.

Every domain model is a frozen pydantic model. Construction that may fail
goes through safe_parse(), which turns a pydantic ValidationError into an
Err carrying only the FIRST violation message. Callers never get the full
list of violations.
"""
from typing import Any, Type, TypeVar, Union

import pydantic
from pydantic import BaseModel, ConfigDict, TypeAdapter

from ordering.shared.errors import ValidationError
from ordering.shared.result import Err, Ok, Result

M = TypeVar("M")

DEFAULT_ERROR_MESSAGE = "Invalid value"


class DomainModel(BaseModel):
    """Base for immutable, schema-validated domain types."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        revalidate_instances="always",
    )


def first_error_message(
    exc: pydantic.ValidationError,
    fallback: str = DEFAULT_ERROR_MESSAGE,
) -> str:
    """Return the message of the first schema violation."""
    errors = exc.errors()
    if not errors:
        return fallback
    return errors[0].get("msg") or fallback


def safe_parse(
    schema: Union[Type[M], TypeAdapter],
    data: Any,
    fallback: str = DEFAULT_ERROR_MESSAGE,
) -> Result[M, ValidationError]:
    """
    Validate data against a model class or TypeAdapter without raising.

    Args:
        schema: DomainModel subclass or TypeAdapter for a union type
        data: Raw mapping or model instance
        fallback: Message used when pydantic reports no error details

    Returns:
        Ok(validated value) or Err(ValidationError(first message))
    """
    try:
        if isinstance(schema, TypeAdapter):
            value = schema.validate_python(data)
        else:
            value = schema.model_validate(data)
    except pydantic.ValidationError as exc:
        return Err(ValidationError(first_error_message(exc, fallback)))
    return Ok(value)
