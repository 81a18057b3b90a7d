"""
Tests for the role system.
"""

import pytest

from capstone_backend.core.roles import ROLE_DESCRIPTIONS
from capstone_backend.core.roles import Role
from capstone_backend.core.roles import assign_role
from capstone_backend.core.roles import get_user_roles
from capstone_backend.core.roles import is_admin
from capstone_backend.core.roles import is_coordinator
from capstone_backend.core.roles import remove_role
from capstone_backend.core.roles import user_has_any_role
from capstone_backend.core.roles import user_has_role
from capstone_backend.users.tests.factories import UserFactory


class TestRoleEnum:
    """Tests for the Role enum."""

    def test_role_values(self):
        """Test that the 3 roles match their group names."""
        assert len(Role) == 3
        assert Role.ADMIN.value == "Admin"
        assert Role.PROJECT_COORDINATOR.value == "Project Coordinator"
        assert Role.FACULTY.value == "Faculty"

    def test_role_choices(self):
        choices = Role.choices()
        assert ("Admin", "Admin") in choices
        assert len(choices) == 3

    def test_role_descriptions(self):
        """Test that all roles have descriptions."""
        for role in Role:
            assert ROLE_DESCRIPTIONS[role]


@pytest.mark.django_db
class TestRoleMembership:
    """Tests for reading and changing a user's roles."""

    def test_user_without_groups_has_no_roles(self):
        user = UserFactory()
        assert get_user_roles(user) == []
        assert user_has_role(user, Role.FACULTY) is False

    def test_assign_role_creates_missing_group(self):
        user = UserFactory()
        assign_role(user, Role.FACULTY)

        assert get_user_roles(user) == ["Faculty"]
        assert user_has_role(user, "Faculty") is True

    def test_has_any_role(self):
        user = UserFactory()
        assign_role(user, Role.PROJECT_COORDINATOR)

        assert user_has_any_role(user, [Role.ADMIN, Role.PROJECT_COORDINATOR]) is True
        assert user_has_any_role(user, [Role.ADMIN]) is False

    def test_remove_role(self):
        user = UserFactory()
        assign_role(user, Role.PROJECT_COORDINATOR)
        remove_role(user, Role.PROJECT_COORDINATOR)

        assert is_coordinator(user) is False

    def test_remove_role_without_group_is_a_no_op(self):
        user = UserFactory()
        remove_role(user, Role.ADMIN)
        assert get_user_roles(user) == []


@pytest.mark.django_db
class TestIsAdmin:
    """Tests for the is_admin helper."""

    def test_admin_role(self):
        user = UserFactory()
        assign_role(user, Role.ADMIN)
        assert is_admin(user) is True

    def test_superuser_without_role(self):
        user = UserFactory(is_superuser=True)
        assert is_admin(user) is True

    def test_faculty_is_not_admin(self):
        user = UserFactory()
        assign_role(user, Role.FACULTY)
        assert is_admin(user) is False

    def test_none_is_not_admin(self):
        assert is_admin(None) is False
