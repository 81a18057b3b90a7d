"""Faculty schemas for API requests and responses."""

from .faculty import FacultyBulkSchema
from .faculty import FacultyCreateSchema
from .faculty import FacultyListResponseSchema
from .faculty import FacultyResponseSchema
from .faculty import FacultySchema
from .faculty import FacultySummarySchema
from .faculty import FacultyUpdateSchema

__all__ = [
    "FacultyBulkSchema",
    "FacultyCreateSchema",
    "FacultyListResponseSchema",
    "FacultyResponseSchema",
    "FacultySchema",
    "FacultySummarySchema",
    "FacultyUpdateSchema",
]
