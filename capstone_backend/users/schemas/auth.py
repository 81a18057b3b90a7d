"""
Authentication schemas for login, session and password change.
"""

from typing import TYPE_CHECKING
from uuid import UUID

from ninja import Schema
from pydantic import EmailStr
from pydantic import field_validator

from capstone_backend.core.roles import get_user_roles
from capstone_backend.core.schemas import InputSchema

if TYPE_CHECKING:
    from capstone_backend.users.models import User


class LoginSchema(InputSchema):
    """Login request schema."""

    email: EmailStr
    password: str


class FacultyProfileSchema(Schema):
    """Academic profile attached to a faculty account."""

    employee_id: str
    name: str
    role: str
    schools: list[str]
    departments: list[str]
    specializations: list[str]


class UserSchema(Schema):
    """Current user, with the roles the SPA uses for route guarding."""

    id: UUID
    first_name: str
    last_name: str
    email: str
    roles: list[str]
    is_superuser: bool
    faculty: FacultyProfileSchema | None = None

    @staticmethod
    def from_user(user: "User") -> "UserSchema":
        """Create schema from User model."""
        profile = getattr(user, "faculty_profile", None)
        return UserSchema(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            roles=get_user_roles(user),
            is_superuser=user.is_superuser,
            faculty=FacultyProfileSchema(
                employee_id=profile.employee_id,
                name=profile.name,
                role=profile.role,
                schools=profile.schools,
                departments=profile.departments,
                specializations=profile.specializations,
            ) if profile else None,
        )


class LoginResponseSchema(Schema):
    """Login response schema."""

    success: bool
    user: UserSchema | None = None
    csrf_token: str | None = None


class MessageSchema(Schema):
    """Simple message response."""

    success: bool
    message: str | None = None


class CSRFTokenSchema(Schema):
    """CSRF token response."""

    csrf_token: str


class PasswordChangeSchema(InputSchema):
    """Password change schema for authenticated users."""

    current_password: str
    new_password: str
    new_password_confirm: str

    @field_validator("new_password_confirm")
    @classmethod
    def passwords_match(cls, v: str, info) -> str:
        if "new_password" in info.data and v != info.data["new_password"]:
            msg = "Passwords do not match."
            raise ValueError(msg)
        return v
