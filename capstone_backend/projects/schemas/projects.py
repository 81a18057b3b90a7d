"""
Project schemas for API requests and responses.
"""

from datetime import datetime
from uuid import UUID

from ninja import Schema
from pydantic import AliasChoices
from pydantic import Field

from capstone_backend.core.schemas import InputSchema
from capstone_backend.core.schemas import ScopeSchema
from capstone_backend.core.schemas import SuccessSchema
from capstone_backend.faculty.schemas import FacultySummarySchema
from capstone_backend.panels.schemas import PanelMemberSchema
from capstone_backend.students.schemas.students import StudentSummarySchema


class ProjectPanelSchema(Schema):
    id: UUID
    panel_name: str
    venue: str


class ProjectSchema(Schema):
    id: UUID
    name: str
    academic_year: str
    school: str
    department: str
    specialization: str
    project_type: str
    status: str
    best_project: bool
    guide_faculty: FacultySummarySchema
    students: list[StudentSummarySchema]
    panel: ProjectPanelSchema | None = None
    completed_at: datetime | None = None
    created: datetime


class ProjectResponseSchema(SuccessSchema):
    data: ProjectSchema


class ProjectListResponseSchema(SuccessSchema):
    data: list[ProjectSchema]
    count: int


class GuideProjectsSchema(Schema):
    faculty: FacultySummarySchema
    guided_projects: list[ProjectSchema]


class GuideProjectsResponseSchema(SuccessSchema):
    data: list[GuideProjectsSchema]


class PanelProjectsSchema(Schema):
    panel_id: UUID
    panel_name: str
    members: list[PanelMemberSchema]
    venue: str
    school: str
    department: str
    projects: list[ProjectSchema]


class PanelProjectsResponseSchema(SuccessSchema):
    data: list[PanelProjectsSchema]


class BestProjectSchema(Schema):
    best_project: bool


class BestProjectResponseSchema(SuccessSchema):
    data: BestProjectSchema


class ProjectCreateSchema(ScopeSchema):
    name: str = Field(min_length=1)
    guide_employee_id: str
    student_reg_nos: list[str] = Field(min_length=1)
    specialization: str = ""
    project_type: str = ""


class ReassignGuideSchema(InputSchema):
    guide_employee_id: str = Field(
        validation_alias=AliasChoices("newGuideFacultyEmpId", "guideEmployeeId", "guide_employee_id"),
    )
