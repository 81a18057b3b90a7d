"""
Project coordinator schemas for API requests and responses.
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from ninja import Schema
from pydantic import ConfigDict

from capstone_backend.core.schemas import InputSchema
from capstone_backend.core.schemas import ScopeSchema
from capstone_backend.core.schemas import SuccessSchema
from capstone_backend.faculty.schemas import FacultySummarySchema


class CapabilitySchema(Schema):
    """
    One capability setting.

    Keys keep their camelCase form because the permissions map is stored
    and returned as-is.
    """

    model_config = ConfigDict(extra="allow")

    enabled: bool | None = None
    useGlobalDeadline: bool | None = None
    deadline: datetime | None = None


class ProjectCoordinatorSchema(Schema):
    id: UUID
    faculty: FacultySummarySchema
    academic_year: str
    school: str
    department: str
    is_primary: bool
    is_active: bool
    permissions: dict[str, dict[str, Any]]
    created: datetime


class ProjectCoordinatorResponseSchema(SuccessSchema):
    data: ProjectCoordinatorSchema


class ProjectCoordinatorListResponseSchema(SuccessSchema):
    data: list[ProjectCoordinatorSchema]
    count: int


class ProjectCoordinatorAssignSchema(ScopeSchema):
    faculty_employee_id: str
    is_primary: bool = False
    permissions: dict[str, CapabilitySchema] | None = None


class ProjectCoordinatorUpdateSchema(InputSchema):
    is_primary: bool | None = None
    is_active: bool | None = None


class PermissionsUpdateSchema(InputSchema):
    permissions: dict[str, CapabilitySchema]
