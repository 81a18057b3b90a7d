"""
Marks API controllers.
"""

from capstone_backend.marks.api.marks import FacultyMarksController
from capstone_backend.marks.api.marks import MarkingSchemaController

__all__ = ["FacultyMarksController", "MarkingSchemaController"]
