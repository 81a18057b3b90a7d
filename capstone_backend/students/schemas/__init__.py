"""Student schemas for API requests and responses."""

from .students import StudentListResponseSchema
from .students import StudentRowSchema
from .students import StudentSchema
from .students import StudentSummarySchema
from .students import StudentUploadSchema

__all__ = [
    "StudentListResponseSchema",
    "StudentRowSchema",
    "StudentSchema",
    "StudentSummarySchema",
    "StudentUploadSchema",
]
