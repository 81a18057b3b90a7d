"""User schemas for API requests and responses."""

from .auth import CSRFTokenSchema
from .auth import FacultyProfileSchema
from .auth import LoginResponseSchema
from .auth import LoginSchema
from .auth import PasswordChangeSchema
from .auth import UserSchema

__all__ = [
    "CSRFTokenSchema",
    "FacultyProfileSchema",
    "LoginResponseSchema",
    "LoginSchema",
    "PasswordChangeSchema",
    "UserSchema",
]
