"""
Student API controllers.
"""

from capstone_backend.students.api.students import StudentAdminController

__all__ = ["StudentAdminController"]
