"""Input validation utilities."""

from collections.abc import Mapping
from typing import Any, TypeVar

import pydantic
from pydantic import BaseModel

from postguard.core.errors import validation_error_from_pydantic


ModelT = TypeVar("ModelT", bound=BaseModel)


def parse_input(model: type[ModelT], payload: ModelT | Mapping[str, Any]) -> ModelT:
    """Validate raw service input against a schema.

    Already-validated schema instances are returned unchanged.

    Args:
        model: The pydantic schema to validate against
        payload: A schema instance or a mapping of raw values

    Returns:
        A validated schema instance

    Raises:
        ValidationError: If the payload does not satisfy the schema
    """
    if isinstance(payload, model):
        return payload
    try:
        return model.model_validate(payload)
    except pydantic.ValidationError as exc:
        raise validation_error_from_pydantic(exc) from exc
