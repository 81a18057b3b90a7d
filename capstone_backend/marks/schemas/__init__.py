"""Marking schema and mark entry schemas."""

from .marks import ComponentSchema
from .marks import LevelSchema
from .marks import MarkingSchemaCreateSchema
from .marks import MarkingSchemaResponseSchema
from .marks import MarkingSchemaSchema
from .marks import MarkingSchemaUpdateSchema
from .marks import MarksListResponseSchema
from .marks import MarksSchema
from .marks import ReviewSchema
from .marks import StudentMetaSchema
from .marks import TeamMarksResponseSchema
from .marks import TeamMarksSchema
from .marks import TeamMarksSubmitSchema

__all__ = [
    "ComponentSchema",
    "LevelSchema",
    "MarkingSchemaCreateSchema",
    "MarkingSchemaResponseSchema",
    "MarkingSchemaSchema",
    "MarkingSchemaUpdateSchema",
    "MarksListResponseSchema",
    "MarksSchema",
    "ReviewSchema",
    "StudentMetaSchema",
    "TeamMarksResponseSchema",
    "TeamMarksSchema",
    "TeamMarksSubmitSchema",
]
