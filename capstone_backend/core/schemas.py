"""
Base schemas for the API.
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from ninja import Schema
from pydantic import ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchema(Schema):
    """
    Base schema with common fields.

    Provides standard fields for models inheriting from BaseModel.
    """

    id: UUID
    created: datetime
    modified: datetime


class InputSchema(Schema):
    """
    Base for request bodies.

    Strings are stripped of surrounding whitespace, and fields are accepted
    under both their snake_case name and the camelCase name the SPA sends.
    """

    model_config = ConfigDict(
        str_strip_whitespace=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ScopeSchema(InputSchema):
    """Academic year, school and department triple."""

    academic_year: str
    school: str
    department: str


class SuccessSchema(Schema):
    """Schema for success responses."""

    success: bool = True
    message: str | None = None


class BatchResultSchema(Schema):
    """Outcome of a batch operation; per-item failures are listed in ``details``."""

    created: int = 0
    updated: int = 0
    assigned: int = 0
    errors: int = 0
    details: list[dict[str, Any]] = []


class BatchResponseSchema(SuccessSchema):
    data: BatchResultSchema
