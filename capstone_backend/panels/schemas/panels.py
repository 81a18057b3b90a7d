"""
Panel schemas for API requests and responses.
"""

from datetime import datetime
from typing import Literal
from uuid import UUID

from ninja import Schema
from pydantic import AliasChoices
from pydantic import Field

from capstone_backend.core.schemas import InputSchema
from capstone_backend.core.schemas import ScopeSchema
from capstone_backend.core.schemas import SuccessSchema


class PanelMemberSchema(Schema):
    employee_id: str
    name: str
    email_id: str
    role: str
    position: int


class PanelSchema(Schema):
    id: UUID
    panel_name: str
    academic_year: str
    school: str
    department: str
    venue: str
    specializations: list[str]
    panel_type: str
    max_projects: int
    assigned_projects_count: int
    is_active: bool
    members: list[PanelMemberSchema]
    created: datetime


class PanelResponseSchema(SuccessSchema):
    data: PanelSchema


class PanelListResponseSchema(SuccessSchema):
    data: list[PanelSchema]
    count: int


class PanelCreateSchema(ScopeSchema):
    """Members are given in order; the first one chairs the panel."""

    member_employee_ids: list[str]
    panel_name: str | None = None
    venue: str = ""
    specializations: list[str] = []
    panel_type: Literal["regular", "temporary"] = Field(
        default="regular",
        validation_alias=AliasChoices("panelType", "type", "panel_type"),
    )
    max_projects: int | None = Field(default=None, ge=1)


class PanelUpdateSchema(InputSchema):
    panel_name: str | None = None
    venue: str | None = None
    specializations: list[str] | None = None
    panel_type: Literal["regular", "temporary"] | None = None
    max_projects: int | None = Field(default=None, ge=1)
    is_active: bool | None = None
    member_employee_ids: list[str] | None = None


class PanelMembersUpdateSchema(InputSchema):
    member_employee_ids: list[str]


class PanelAssignSchema(InputSchema):
    panel_id: UUID
    project_id: UUID


class PanelAssignmentSchema(Schema):
    panel_id: UUID
    project_id: UUID
    assigned_projects_count: int
    max_projects: int


class PanelAssignResponseSchema(SuccessSchema):
    data: PanelAssignmentSchema


class AutoCreateSchema(InputSchema):
    departments: list[str] = Field(min_length=1)
    school: str
    academic_year: str
    panel_size: int | None = Field(default=None, ge=1)
    background: bool = False


class AutoAssignSchema(ScopeSchema):
    background: bool = False


class TaskQueuedSchema(SuccessSchema):
    task_id: str
