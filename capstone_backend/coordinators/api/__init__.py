"""
Project coordinator API controllers.
"""

from capstone_backend.coordinators.api.coordinators import ProjectCoordinatorAdminController

__all__ = ["ProjectCoordinatorAdminController"]
