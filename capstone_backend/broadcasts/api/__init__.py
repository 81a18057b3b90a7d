"""
Broadcast API controllers.
"""

from capstone_backend.broadcasts.api.broadcasts import BroadcastAdminController
from capstone_backend.broadcasts.api.broadcasts import FacultyBroadcastController

__all__ = ["BroadcastAdminController", "FacultyBroadcastController"]
