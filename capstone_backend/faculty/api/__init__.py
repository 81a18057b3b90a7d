"""
Faculty API controllers.
"""

from capstone_backend.faculty.api.faculty import FacultyAdminController

__all__ = ["FacultyAdminController"]
