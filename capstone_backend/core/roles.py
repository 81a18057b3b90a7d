"""
Role definitions for the capstone review portal.

Defines the 3 roles used across the platform:
- Admin: Academic office staff who manage master data, faculty, panels
- Project Coordinator: Faculty granted scoped admin capabilities
- Faculty: Guides and panel members who enter marks
"""

from enum import Enum

from django.contrib.auth.models import Group


class Role(str, Enum):
    """
    Enum of available roles.

    Values match Django Group names exactly.
    """

    ADMIN = "Admin"
    PROJECT_COORDINATOR = "Project Coordinator"
    FACULTY = "Faculty"

    @classmethod
    def choices(cls) -> list[tuple[str, str]]:
        """Return choices for Django form fields."""
        return [(role.value, role.value) for role in cls]

    @classmethod
    def values(cls) -> list[str]:
        """Return all role values."""
        return [role.value for role in cls]


# Role descriptions for documentation and admin interfaces
ROLE_DESCRIPTIONS = {
    Role.ADMIN: "Admin - Manages master data, faculty, students, panels and schemas",
    Role.PROJECT_COORDINATOR: "Project Coordinator - Scoped admin rights for one department",
    Role.FACULTY: "Faculty - Guides projects, sits on panels, enters marks",
}


def _role_name(role: Role | str) -> str:
    return role.value if isinstance(role, Role) else role


def get_user_roles(user) -> list[str]:
    """
    Get the list of role names for a user.

    Args:
        user: Django User instance

    Returns:
        List of role names the user belongs to
    """
    if not user or not user.is_authenticated:
        return []

    return list(user.groups.values_list("name", flat=True))


def user_has_role(user, role: Role | str) -> bool:
    """
    Check if a user has a specific role.

    Args:
        user: Django User instance
        role: Role enum value or role name string

    Returns:
        True if user has the role
    """
    if not user or not user.is_authenticated:
        return False

    return user.groups.filter(name=_role_name(role)).exists()


def user_has_any_role(user, roles: list[Role | str]) -> bool:
    """
    Check if a user has any of the specified roles.

    Args:
        user: Django User instance
        roles: List of Role enum values or role name strings

    Returns:
        True if user has at least one of the roles
    """
    if not user or not user.is_authenticated:
        return False

    return user.groups.filter(name__in=[_role_name(r) for r in roles]).exists()


def assign_role(user, role: Role | str) -> None:
    """Add the user to the role's group, creating the group if needed."""
    group, _ = Group.objects.get_or_create(name=_role_name(role))
    user.groups.add(group)


def remove_role(user, role: Role | str) -> None:
    """Remove the user from the role's group."""
    group = Group.objects.filter(name=_role_name(role)).first()
    if group is not None:
        user.groups.remove(group)


# ============================================================================
# Convenience functions for common permission checks
# ============================================================================


def is_admin(user) -> bool:
    """
    Check if user has admin privileges.

    Returns True for superusers or users with Admin role.
    """
    if not user or not user.is_authenticated:
        return False
    if user.is_superuser:
        return True
    return user_has_role(user, Role.ADMIN)


def is_coordinator(user) -> bool:
    """Check if user currently holds the Project Coordinator role."""
    return user_has_role(user, Role.PROJECT_COORDINATOR)
