"""
Faculty request API controllers.
"""

from capstone_backend.faculty_requests.api.requests import FacultyRequestController
from capstone_backend.faculty_requests.api.requests import RequestAdminController

__all__ = ["FacultyRequestController", "RequestAdminController"]
