"""Common schemas."""
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# Largest value a signed 64-bit INTEGER column holds
MAX_INTEGER = 2**63 - 1


class CamelModel(BaseModel):
    """Base schema exchanging camelCase JSON field names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ErrorDetail(BaseModel):
    """Error detail."""

    code: str
    message: str
    details: dict[str, Any] | None = None


class ErrorResponse(BaseModel):
    """Error response body."""

    success: bool = False
    error: ErrorDetail


class SuccessResponse(BaseModel):
    """Bare acknowledgement."""

    success: bool = True
