"""
Tests for the permission classes.
"""

import pytest
from django.contrib.auth.models import AnonymousUser
from django.test import RequestFactory

from capstone_backend.core.api.permissions import AllowAny
from capstone_backend.core.api.permissions import IsAdmin
from capstone_backend.core.api.permissions import IsAdminOrCoordinator
from capstone_backend.core.api.permissions import IsAuthenticated
from capstone_backend.core.api.permissions import IsFaculty
from capstone_backend.core.api.permissions import has_any_role
from capstone_backend.core.roles import Role
from capstone_backend.core.roles import assign_role
from capstone_backend.users.tests.factories import UserFactory


@pytest.fixture
def request_factory():
    """Return a Django RequestFactory."""
    return RequestFactory()


def make_request(request_factory, user=None):
    """Create a request with the given user."""
    request = request_factory.get("/")
    request.user = user if user else AnonymousUser()
    return request


def user_with_roles(*roles):
    user = UserFactory()
    for role in roles:
        assign_role(user, role)
    return user


@pytest.mark.django_db
class TestIsAuthenticated:
    """Tests for IsAuthenticated permission."""

    def test_anonymous_user_denied(self, request_factory):
        request = make_request(request_factory)
        assert IsAuthenticated().has_permission(request, None) is False

    def test_authenticated_user_allowed(self, request_factory):
        request = make_request(request_factory, UserFactory())
        assert IsAuthenticated().has_permission(request, None) is True


@pytest.mark.django_db
class TestRolePermissions:
    """Tests for the role-set permission classes."""

    @pytest.mark.parametrize(
        ("permission", "roles", "allowed"),
        [
            (IsAdmin, [Role.ADMIN], True),
            (IsAdmin, [Role.PROJECT_COORDINATOR], False),
            (IsAdmin, [Role.FACULTY], False),
            (IsAdminOrCoordinator, [Role.ADMIN], True),
            (IsAdminOrCoordinator, [Role.PROJECT_COORDINATOR], True),
            (IsAdminOrCoordinator, [Role.FACULTY], False),
            (IsFaculty, [Role.FACULTY], True),
            (IsFaculty, [Role.PROJECT_COORDINATOR], True),
            (IsFaculty, [Role.ADMIN], False),
            (IsFaculty, [], False),
        ],
    )
    def test_role_sets(self, request_factory, permission, roles, allowed):
        request = make_request(request_factory, user_with_roles(*roles))
        assert permission().has_permission(request, None) is allowed

    def test_anonymous_user_denied(self, request_factory):
        request = make_request(request_factory)
        for permission in (IsAdmin, IsAdminOrCoordinator, IsFaculty):
            assert permission().has_permission(request, None) is False

    def test_superuser_passes_every_role_check(self, request_factory):
        request = make_request(request_factory, UserFactory(is_superuser=True))
        for permission in (IsAdmin, IsAdminOrCoordinator, IsFaculty):
            assert permission().has_permission(request, None) is True

    def test_has_any_role_builds_permission_class(self, request_factory):
        permission = has_any_role(Role.FACULTY, Role.ADMIN)

        assert permission.roles == (Role.FACULTY, Role.ADMIN)
        assert permission().has_permission(make_request(request_factory, user_with_roles(Role.ADMIN)), None)
        assert not permission().has_permission(
            make_request(request_factory, user_with_roles(Role.PROJECT_COORDINATOR)),
            None,
        )


class TestAllowAny:
    def test_anonymous_user_allowed(self):
        request = RequestFactory().get("/")
        request.user = AnonymousUser()
        assert AllowAny().has_permission(request, None) is True
