import pytest
from django.contrib.auth.models import Group
from django.test import Client

from capstone_backend.core.roles import Role
from capstone_backend.core.roles import assign_role
from capstone_backend.faculty.models import FacultyRole
from capstone_backend.faculty.tests.factories import FacultyFactory
from capstone_backend.users.tests.factories import UserFactory


@pytest.fixture
def role_groups(db):
    """Create all role groups."""
    return {role: Group.objects.get_or_create(name=role.value)[0] for role in Role}


@pytest.fixture
def admin_user(db):
    user = UserFactory(email="admin@capstone.edu", first_name="Portal", last_name="Admin")
    assign_role(user, Role.ADMIN)
    return user


@pytest.fixture
def admin_faculty(db):
    """Admin with a faculty profile, as created through the faculty admin screen."""
    return FacultyFactory(role=FacultyRole.ADMIN, employee_id="A0001")


@pytest.fixture
def faculty(db):
    return FacultyFactory(employee_id="F1001")


@pytest.fixture
def client_for():
    """Return a factory of clients logged in as the given user."""

    def make(user):
        client = Client()
        client.force_login(user)
        return client

    return make


@pytest.fixture
def admin_client(admin_user, client_for):
    return client_for(admin_user)


@pytest.fixture
def faculty_client(faculty, client_for):
    return client_for(faculty.user)


@pytest.fixture
def coordinator(faculty):
    """Non-primary coordinator record of F1001 for 2025-2026 SCOPE/CSE."""
    from capstone_backend.coordinators.services import assign_coordinator

    return assign_coordinator(faculty.employee_id, "2025-2026", "SCOPE", "CSE")


@pytest.fixture
def coordinator_client(coordinator, client_for):
    return client_for(coordinator.faculty.user)
