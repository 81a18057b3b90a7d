"""Faculty request schemas for API requests and responses."""

from .requests import FacultyRequestCreateSchema
from .requests import FacultyRequestGroupResponseSchema
from .requests import FacultyRequestGroupSchema
from .requests import FacultyRequestListResponseSchema
from .requests import FacultyRequestResponseSchema
from .requests import FacultyRequestSchema
from .requests import RequestStatusUpdateSchema

__all__ = [
    "FacultyRequestCreateSchema",
    "FacultyRequestGroupResponseSchema",
    "FacultyRequestGroupSchema",
    "FacultyRequestListResponseSchema",
    "FacultyRequestResponseSchema",
    "FacultyRequestSchema",
    "RequestStatusUpdateSchema",
]
