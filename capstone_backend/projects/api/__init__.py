"""
Project API controllers.
"""

from capstone_backend.projects.api.projects import ProjectAdminController
from capstone_backend.projects.api.projects import ProjectCoordinatorController

__all__ = ["ProjectAdminController", "ProjectCoordinatorController"]
