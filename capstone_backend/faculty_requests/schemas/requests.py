"""
Faculty request schemas for API requests and responses.
"""

from datetime import datetime
from typing import Literal
from uuid import UUID

from ninja import Schema
from pydantic import Field

from capstone_backend.core.schemas import InputSchema
from capstone_backend.core.schemas import SuccessSchema
from capstone_backend.faculty.schemas import FacultySummarySchema


class FacultyRequestSchema(Schema):
    id: UUID
    faculty: FacultySummarySchema
    project_id: UUID
    project_name: str
    school: str
    department: str
    academic_year: str
    student_reg_no: str | None = None
    student_name: str | None = None
    category: str
    review_name: str
    message: str
    status: str
    remarks: str
    new_deadline: datetime | None = None
    resolved_at: datetime | None = None
    created: datetime


class FacultyRequestResponseSchema(SuccessSchema):
    data: FacultyRequestSchema


class FacultyRequestListResponseSchema(SuccessSchema):
    data: list[FacultyRequestSchema]
    count: int


class FacultyRequestGroupSchema(Schema):
    faculty: FacultySummarySchema
    requests: list[FacultyRequestSchema]


class FacultyRequestGroupResponseSchema(SuccessSchema):
    data: list[FacultyRequestGroupSchema]


class FacultyRequestCreateSchema(InputSchema):
    project_id: UUID
    category: Literal["guide", "panel"]
    review_name: str = Field(min_length=1)
    message: str = Field(min_length=1)
    student_reg_no: str | None = None


class RequestStatusUpdateSchema(InputSchema):
    status: Literal["approved", "rejected"]
    remarks: str = ""
    new_deadline: datetime | None = None
