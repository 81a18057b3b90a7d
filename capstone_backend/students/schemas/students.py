"""
Student schemas for API requests and responses.
"""

from uuid import UUID

from ninja import Schema
from pydantic import Field

from capstone_backend.core.schemas import InputSchema
from capstone_backend.core.schemas import ScopeSchema
from capstone_backend.core.schemas import SuccessSchema


class StudentSummarySchema(Schema):
    reg_no: str
    name: str
    email_id: str
    pat: bool

    @classmethod
    def from_student(cls, student) -> "StudentSummarySchema":
        return cls(
            reg_no=student.reg_no,
            name=student.name,
            email_id=student.email_id,
            pat=student.pat,
        )


class StudentSchema(Schema):
    id: UUID
    reg_no: str
    name: str
    email_id: str
    academic_year: str
    school: str
    department: str
    pat: bool
    is_active: bool


class StudentListResponseSchema(SuccessSchema):
    data: list[StudentSchema]
    count: int


class StudentRowSchema(InputSchema):
    """One parsed roster row; completeness is checked per row on upload."""

    reg_no: str | None = None
    name: str | None = None
    email_id: str | None = None
    pat: bool | None = None


class StudentUploadSchema(ScopeSchema):
    students: list[StudentRowSchema] = Field(min_length=1)
