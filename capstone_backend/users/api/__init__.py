"""
User API controllers.
"""

from capstone_backend.users.api.auth import AuthController

__all__ = ["AuthController"]
