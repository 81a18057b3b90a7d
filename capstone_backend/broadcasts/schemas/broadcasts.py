"""
Broadcast schemas for API requests and responses.
"""

from datetime import datetime
from uuid import UUID

from ninja import Schema

from capstone_backend.core.schemas import InputSchema
from capstone_backend.core.schemas import SuccessSchema


class BroadcastSchema(Schema):
    id: UUID
    title: str
    message: str
    target_schools: list[str]
    target_departments: list[str]
    target_academic_years: list[str]
    created_by_employee_id: str
    created_by_name: str
    expires_at: datetime
    is_active: bool
    action: str
    priority: str
    created: datetime


class BroadcastResponseSchema(SuccessSchema):
    data: BroadcastSchema


class BroadcastListResponseSchema(SuccessSchema):
    data: list[BroadcastSchema]
    count: int


class BroadcastCreateSchema(InputSchema):
    """Choices are checked by the service so errors carry readable messages."""

    title: str = ""
    message: str | None = None
    target_schools: list[str] = []
    target_departments: list[str] = []
    target_academic_years: list[str] = []
    expires_at: datetime | None = None
    action: str = "notice"
    priority: str = "medium"


class BroadcastUpdateSchema(InputSchema):
    title: str | None = None
    message: str | None = None
    target_schools: list[str] | None = None
    target_departments: list[str] | None = None
    target_academic_years: list[str] | None = None
    expires_at: datetime | None = None
    is_active: bool | None = None
    action: str | None = None
    priority: str | None = None
