from capstone_backend.core.api.base import BaseAPI
from capstone_backend.core.api.permissions import AllowAny
from capstone_backend.core.api.permissions import HasAnyRole
from capstone_backend.core.api.permissions import IsAdmin
from capstone_backend.core.api.permissions import IsAdminOrCoordinator
from capstone_backend.core.api.permissions import IsAuthenticated
from capstone_backend.core.api.permissions import IsFaculty
from capstone_backend.core.api.permissions import has_any_role

__all__ = [
    "BaseAPI",
    "AllowAny",
    "HasAnyRole",
    "IsAdmin",
    "IsAdminOrCoordinator",
    "IsAuthenticated",
    "IsFaculty",
    "has_any_role",
]
