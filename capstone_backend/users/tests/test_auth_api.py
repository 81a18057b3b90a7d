"""
Tests for the authentication API endpoints.
"""

import pytest
from django.test import Client

from capstone_backend.core.roles import Role
from capstone_backend.core.roles import assign_role
from capstone_backend.faculty.tests.factories import FacultyFactory
from capstone_backend.users.tests.factories import TEST_PASSWORD
from capstone_backend.users.tests.factories import UserFactory


@pytest.fixture
def user(db):
    """Create a regular user."""
    return UserFactory(email="user@test.com", first_name="John", last_name="Doe")


@pytest.fixture
def unauthenticated_client():
    """Return an unauthenticated client holding a CSRF token."""
    client = Client()
    response = client.get("/api/auth/csrf")
    client.csrf_token = response.json()["csrf_token"]
    return client


def login(client, email, password):
    return client.post(
        "/api/auth/login",
        data={"email": email, "password": password},
        content_type="application/json",
        HTTP_X_CSRFTOKEN=client.csrf_token,
    )


@pytest.mark.django_db
class TestLoginEndpoint:
    """Tests for POST /api/auth/login."""

    def test_login_with_valid_credentials(self, unauthenticated_client, user):
        response = login(unauthenticated_client, "user@test.com", TEST_PASSWORD)

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["user"]["email"] == "user@test.com"
        assert data["csrf_token"]

    def test_login_returns_roles_and_faculty_profile(self, unauthenticated_client):
        faculty = FacultyFactory(employee_id="F2001", specializations=["Security"])

        response = login(unauthenticated_client, faculty.user.email, TEST_PASSWORD)

        data = response.json()["user"]
        assert data["roles"] == ["Faculty"]
        assert data["faculty"]["employee_id"] == "F2001"
        assert data["faculty"]["specializations"] == ["Security"]

    def test_login_with_wrong_password(self, unauthenticated_client, user):
        response = login(unauthenticated_client, "user@test.com", "wrong")

        assert response.status_code == 401
        assert response.json()["code"] == "INVALID_CREDENTIALS"

    def test_login_with_disabled_account(self, unauthenticated_client, user):
        user.is_active = False
        user.save()

        response = login(unauthenticated_client, "user@test.com", TEST_PASSWORD)

        assert response.status_code == 401
        assert response.json()["code"] == "ACCOUNT_DISABLED"


@pytest.mark.django_db
class TestMeEndpoint:
    """Tests for GET /api/auth/me."""

    def test_authenticated_user_can_get_profile(self, client_for, user):
        assign_role(user, Role.ADMIN)

        response = client_for(user).get("/api/auth/me")

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == str(user.id)
        assert data["first_name"] == "John"
        assert data["roles"] == ["Admin"]
        assert data["faculty"] is None

    def test_unauthenticated_user_cannot_get_profile(self, unauthenticated_client):
        response = unauthenticated_client.get("/api/auth/me")

        assert response.status_code == 401
        assert response.json()["code"] == "NOT_AUTHENTICATED"


@pytest.mark.django_db
class TestLogoutEndpoint:
    def test_logout_ends_session(self, client_for, user):
        client = client_for(user)

        response = client.post("/api/auth/logout")

        assert response.status_code == 200
        assert client.get("/api/auth/me").status_code == 401


@pytest.mark.django_db
class TestPasswordChangeEndpoint:
    """Tests for POST /api/auth/password-change."""

    def test_change_password(self, client_for, user):
        response = client_for(user).post(
            "/api/auth/password-change",
            data={
                "currentPassword": TEST_PASSWORD,
                "newPassword": "N3w-secure-passphrase",
                "newPasswordConfirm": "N3w-secure-passphrase",
            },
            content_type="application/json",
        )

        assert response.status_code == 200
        user.refresh_from_db()
        assert user.check_password("N3w-secure-passphrase")

    def test_wrong_current_password(self, client_for, user):
        response = client_for(user).post(
            "/api/auth/password-change",
            data={
                "current_password": "nope",
                "new_password": "N3w-secure-passphrase",
                "new_password_confirm": "N3w-secure-passphrase",
            },
            content_type="application/json",
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Current password is incorrect."

    def test_mismatched_confirmation(self, client_for, user):
        response = client_for(user).post(
            "/api/auth/password-change",
            data={
                "current_password": TEST_PASSWORD,
                "new_password": "N3w-secure-passphrase",
                "new_password_confirm": "different-passphrase",
            },
            content_type="application/json",
        )

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"
