"""
Master data schemas for API requests and responses.
"""

import re
from uuid import UUID

from ninja import Schema
from pydantic import Field
from pydantic import field_validator

from capstone_backend.core.schemas import InputSchema
from capstone_backend.core.schemas import ScopeSchema
from capstone_backend.core.schemas import SuccessSchema

ACADEMIC_YEAR_PATTERN = re.compile(r"^(\d{4})-(\d{4})$")


class DepartmentSchema(Schema):
    id: UUID
    code: str
    name: str


class SchoolSchema(Schema):
    id: UUID
    code: str
    name: str
    departments: list[DepartmentSchema] = []


class AcademicYearSchema(Schema):
    id: UUID
    year: str
    is_active: bool


class MasterDataSchema(Schema):
    schools: list[SchoolSchema]
    academic_years: list[AcademicYearSchema]


class MasterDataResponseSchema(SuccessSchema):
    data: MasterDataSchema


class SchoolCreateSchema(InputSchema):
    code: str = Field(min_length=1, max_length=50)
    name: str = Field(min_length=1, max_length=200)


class DepartmentCreateSchema(InputSchema):
    school: str = Field(min_length=1)
    code: str = Field(min_length=1, max_length=100)
    name: str = Field(min_length=1, max_length=200)


class AcademicYearCreateSchema(InputSchema):
    year: str
    is_active: bool = True

    @field_validator("year")
    @classmethod
    def consecutive_years(cls, v: str) -> str:
        match = ACADEMIC_YEAR_PATTERN.match(v)
        if not match or int(match.group(2)) != int(match.group(1)) + 1:
            msg = "Academic year must look like 2025-2026."
            raise ValueError(msg)
        return v


class DepartmentConfigSchema(Schema):
    id: UUID
    academic_year: str
    school: str
    department: str
    min_panel_size: int
    max_panel_size: int
    min_team_size: int
    max_team_size: int


class DepartmentConfigResponseSchema(SuccessSchema):
    data: DepartmentConfigSchema


class DepartmentConfigUpdateSchema(ScopeSchema):
    min_panel_size: int | None = Field(default=None, ge=1)
    max_panel_size: int | None = Field(default=None, ge=1)
    min_team_size: int | None = Field(default=None, ge=1)
    max_team_size: int | None = Field(default=None, ge=1)
