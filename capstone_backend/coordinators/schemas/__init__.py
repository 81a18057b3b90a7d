"""Project coordinator schemas for API requests and responses."""

from .coordinators import CapabilitySchema
from .coordinators import PermissionsUpdateSchema
from .coordinators import ProjectCoordinatorAssignSchema
from .coordinators import ProjectCoordinatorListResponseSchema
from .coordinators import ProjectCoordinatorResponseSchema
from .coordinators import ProjectCoordinatorSchema
from .coordinators import ProjectCoordinatorUpdateSchema

__all__ = [
    "CapabilitySchema",
    "PermissionsUpdateSchema",
    "ProjectCoordinatorAssignSchema",
    "ProjectCoordinatorListResponseSchema",
    "ProjectCoordinatorResponseSchema",
    "ProjectCoordinatorSchema",
    "ProjectCoordinatorUpdateSchema",
]
