"""Base schema configuration for API models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class APIBaseSchema(BaseModel):
    """
    Base schema for all API models.

    Fields are snake_case in Python and camelCase on the wire, matching the
    query parameter style of the HTTP surface (``dataType``).
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ErrorDetail(APIBaseSchema):
    """Machine-readable error code plus a human message."""

    code: str
    message: str
    details: dict[str, Any] | None = None


class APIError(APIBaseSchema):
    """Error envelope returned for every non-2xx response."""

    error: ErrorDetail

    @classmethod
    def build(cls, code: str, message: str, **details: Any) -> APIError:
        details = {key: value for key, value in details.items() if value is not None}
        return cls(error=ErrorDetail(code=code, message=message, details=details or None))

    def to_content(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")
