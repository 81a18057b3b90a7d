"""
Marking schema and mark entry schemas.
"""

from datetime import datetime
from typing import Literal
from uuid import UUID

from ninja import Schema
from pydantic import Field

from capstone_backend.core.schemas import InputSchema
from capstone_backend.core.schemas import ScopeSchema
from capstone_backend.core.schemas import SuccessSchema


class LevelSchema(InputSchema):
    score: float
    label: str = ""
    description: str = ""


class ComponentSchema(InputSchema):
    component_id: str = Field(min_length=1)
    name: str
    description: str = ""
    max_marks: float = Field(gt=0)
    levels: list[LevelSchema] = Field(min_length=1)


class ReviewSchema(InputSchema):
    review_name: str = Field(min_length=1)
    display_name: str = ""
    faculty_type: Literal["guide", "panel"]
    deadline: datetime | None = None
    requires_ppt: bool = False
    components: list[ComponentSchema] = []


class MarkingSchemaCreateSchema(ScopeSchema):
    reviews: list[ReviewSchema]


class MarkingSchemaUpdateSchema(InputSchema):
    reviews: list[ReviewSchema]


class MarkingSchemaSchema(Schema):
    id: UUID
    academic_year: str
    school: str
    department: str
    reviews: list[ReviewSchema]
    modified: datetime


class MarkingSchemaResponseSchema(SuccessSchema):
    data: MarkingSchemaSchema


class StudentMetaSchema(InputSchema):
    attendance: Literal["present", "absent"] = "present"
    pat: bool = False


class TeamMarksSubmitSchema(InputSchema):
    """Marks and meta are keyed by student registration number."""

    project_id: UUID
    review_name: str
    marks: dict[str, dict[str, float]] = {}
    meta: dict[str, StudentMetaSchema] = {}
    team_comment: str
    ppt_approved: bool = False


class MarksSchema(Schema):
    id: UUID
    student_reg_no: str
    student_name: str
    project_id: UUID
    review_name: str
    faculty_type: str
    component_marks: dict[str, float]
    total_marks: float
    max_total_marks: float
    attendance: str
    pat: bool
    is_submitted: bool
    modified: datetime


class MarksListResponseSchema(SuccessSchema):
    data: list[MarksSchema]
    count: int


class TeamMarksSchema(Schema):
    project_id: UUID
    review_name: str
    team_comment: str
    ppt_approved: bool
    marks: list[MarksSchema]


class TeamMarksResponseSchema(SuccessSchema):
    data: TeamMarksSchema
