"""
Permission classes for API controllers.

Route guarding is role-set membership: a controller (or a single route)
lists the roles allowed to reach it. Superusers pass every role check.
"""

from typing import Any

from django.http import HttpRequest
from ninja_extra import permissions

from capstone_backend.core.roles import Role
from capstone_backend.core.roles import user_has_any_role


class IsAuthenticated(permissions.BasePermission):
    """
    Permission class that requires authentication.

    Checks if the user is authenticated before allowing access.
    """

    message = "Authentication required."

    def has_permission(self, request: HttpRequest, controller: Any) -> bool:
        """Check if the user is authenticated."""
        return bool(request.user and request.user.is_authenticated)


class HasAnyRole(permissions.BasePermission):
    """Allow authenticated users belonging to at least one of ``roles``."""

    roles: tuple[Role, ...] = ()
    message = "You do not have the role required for this action."

    def has_permission(self, request: HttpRequest, controller: Any) -> bool:
        user = request.user
        if not (user and user.is_authenticated):
            return False
        if user.is_superuser:
            return True
        return user_has_any_role(user, list(self.roles))


def has_any_role(*roles: Role) -> type[HasAnyRole]:
    """Build a permission class for an arbitrary role set."""
    name = "HasAnyRole_" + "_".join(r.name for r in roles)
    return type(name, (HasAnyRole,), {"roles": tuple(roles)})


class IsAdmin(HasAnyRole):
    """Admin role (or superuser)."""

    roles = (Role.ADMIN,)
    message = "Admin access required."


class IsAdminOrCoordinator(HasAnyRole):
    """Admin or Project Coordinator role."""

    roles = (Role.ADMIN, Role.PROJECT_COORDINATOR)
    message = "Admin or project coordinator access required."


class IsFaculty(HasAnyRole):
    """Any faculty member, coordinators included."""

    roles = (Role.FACULTY, Role.PROJECT_COORDINATOR)
    message = "Faculty access required."


class AllowAny(permissions.BasePermission):
    """
    Permission class that allows any access.

    Used for public endpoints that don't require authentication.
    """

    def has_permission(self, request: HttpRequest, controller: Any) -> bool:
        """Always return True."""
        return True
