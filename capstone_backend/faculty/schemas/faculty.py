"""
Faculty schemas for API requests and responses.
"""

from datetime import datetime
from typing import Literal
from uuid import UUID

from ninja import Schema
from pydantic import EmailStr
from pydantic import Field
from pydantic import field_validator

from capstone_backend.core.schemas import InputSchema
from capstone_backend.core.schemas import SuccessSchema


def unique_names(values: list[str]) -> list[str]:
    """Drop blanks and duplicates, keeping first-seen order."""
    seen: list[str] = []
    for value in values:
        value = value.strip()
        if value and value not in seen:
            seen.append(value)
    return seen


class FacultySummarySchema(Schema):
    """Minimal faculty information for panels and projects."""

    employee_id: str
    name: str
    email_id: str

    @classmethod
    def from_faculty(cls, faculty) -> "FacultySummarySchema":
        return cls(employee_id=faculty.employee_id, name=faculty.name, email_id=faculty.email_id)


class FacultySchema(Schema):
    id: UUID
    employee_id: str
    name: str
    email_id: str
    phone_number: str
    role: str
    schools: list[str]
    departments: list[str]
    specializations: list[str]
    is_active: bool
    created: datetime


class FacultyListResponseSchema(SuccessSchema):
    data: list[FacultySchema]
    count: int


class FacultyResponseSchema(SuccessSchema):
    data: FacultySchema


class FacultyCreateSchema(InputSchema):
    employee_id: str = Field(min_length=1, max_length=50)
    name: str = Field(min_length=1, max_length=200)
    email_id: EmailStr
    phone_number: str = ""
    role: Literal["faculty", "admin"] = "faculty"
    schools: list[str] = []
    departments: list[str] = []
    specializations: list[str] = []
    password: str | None = None

    @field_validator("schools", "departments", "specializations")
    @classmethod
    def clean_lists(cls, v: list[str]) -> list[str]:
        return unique_names(v)


class FacultyUpdateSchema(InputSchema):
    name: str | None = Field(default=None, min_length=1, max_length=200)
    email_id: EmailStr | None = None
    phone_number: str | None = None
    role: Literal["faculty", "admin"] | None = None
    schools: list[str] | None = None
    departments: list[str] | None = None
    specializations: list[str] | None = None
    is_active: bool | None = None
    password: str | None = None

    @field_validator("schools", "departments", "specializations")
    @classmethod
    def clean_lists(cls, v: list[str] | None) -> list[str] | None:
        return unique_names(v) if v is not None else None


class FacultyBulkSchema(InputSchema):
    faculty: list[FacultyCreateSchema] = Field(min_length=1)
