"""
Tests for faculty requests and their approval.
"""

import pytest

from capstone_backend.core.exceptions import ConflictError
from capstone_backend.core.exceptions import PermissionDeniedError
from capstone_backend.core.exceptions import ValidationError
from capstone_backend.faculty.tests.factories import FacultyFactory
from capstone_backend.faculty_requests import services
from capstone_backend.faculty_requests.models import FacultyRequest
from capstone_backend.faculty_requests.models import RequestStatus
from capstone_backend.panels.services import assign_panel_to_project
from capstone_backend.panels.tests.factories import PanelFactory
from capstone_backend.projects.tests.factories import ProjectFactory
from capstone_backend.students.tests.factories import StudentFactory


@pytest.fixture
def project(faculty):
    return ProjectFactory(guide_faculty=faculty, students=[StudentFactory(reg_no="22BCE1001")])


def request_data(project, **overrides):
    data = {
        "project_id": project.id,
        "category": "guide",
        "review_name": "review1",
        "message": "Missed the deadline because of the lab shutdown.",
    }
    data.update(overrides)
    return data


@pytest.mark.django_db
class TestCreateRequest:
    def test_guide_request(self, faculty, project):
        faculty_request = services.create_request(faculty, request_data(project, student_reg_no="22BCE1001"))

        assert faculty_request.status == RequestStatus.PENDING
        assert faculty_request.student.reg_no == "22BCE1001"

    def test_guide_request_from_non_guide(self, project):
        with pytest.raises(PermissionDeniedError):
            services.create_request(FacultyFactory(), request_data(project))

    def test_panel_request_needs_membership(self, project):
        member, outsider = FacultyFactory(), FacultyFactory()
        panel = PanelFactory(members=[member])
        assign_panel_to_project(panel.id, project.id)

        services.create_request(member, request_data(project, category="panel"))
        with pytest.raises(PermissionDeniedError):
            services.create_request(outsider, request_data(project, category="panel"))

    def test_student_must_be_on_team(self, faculty, project):
        with pytest.raises(ValidationError):
            services.create_request(faculty, request_data(project, student_reg_no="22BCE9999"))

    def test_one_pending_request_per_review(self, faculty, project):
        services.create_request(faculty, request_data(project))

        with pytest.raises(ConflictError):
            services.create_request(faculty, request_data(project))


@pytest.mark.django_db
class TestResolveRequest:
    def test_approve(self, faculty, project, admin_user):
        faculty_request = services.create_request(faculty, request_data(project))

        services.update_request_status(faculty_request.id, "approved", admin_user, remarks="Granted.")

        resolved = FacultyRequest.objects.get(pk=faculty_request.pk)
        assert resolved.status == RequestStatus.APPROVED
        assert resolved.resolved_by == admin_user
        assert resolved.resolved_at is not None

    def test_resolved_request_is_final(self, faculty, project, admin_user):
        faculty_request = services.create_request(faculty, request_data(project))
        services.update_request_status(faculty_request.id, "rejected", admin_user)

        with pytest.raises(ConflictError, match="already been rejected"):
            services.update_request_status(faculty_request.id, "approved", admin_user)

    def test_unknown_status(self, faculty, project, admin_user):
        faculty_request = services.create_request(faculty, request_data(project))

        with pytest.raises(ValidationError):
            services.update_request_status(faculty_request.id, "pending", admin_user)

    def test_new_request_after_resolution(self, faculty, project, admin_user):
        first = services.create_request(faculty, request_data(project))
        services.update_request_status(first.id, "rejected", admin_user)

        second = services.create_request(faculty, request_data(project))

        assert second.pk != first.pk


@pytest.mark.django_db
class TestRequestAPI:
    """Tests for /api/faculty/requests and /api/admin/requests."""

    def test_faculty_files_and_lists(self, faculty_client, project):
        response = faculty_client.post(
            "/api/faculty/requests",
            data={
                "projectId": str(project.id),
                "category": "guide",
                "reviewName": "review1",
                "message": "Please reopen review 1.",
            },
            content_type="application/json",
        )
        assert response.status_code == 201

        mine = faculty_client.get("/api/faculty/requests")
        assert mine.json()["count"] == 1

    def test_admin_approves(self, admin_client, faculty, project):
        faculty_request = services.create_request(faculty, request_data(project))

        response = admin_client.put(
            f"/api/admin/requests/{faculty_request.id}/status",
            data={"status": "approved", "newDeadline": "2030-01-01T00:00:00Z"},
            content_type="application/json",
        )

        assert response.status_code == 200
        assert response.json()["message"] == "Request approved successfully."
        assert response.json()["data"]["new_deadline"].startswith("2030-01-01")

    def test_grouped_by_faculty(self, admin_client, faculty, project):
        services.create_request(faculty, request_data(project))
        services.create_request(faculty, request_data(project, review_name="review2"))

        response = admin_client.get("/api/admin/requests/by-faculty", {"status": "pending"})

        data = response.json()["data"]
        assert len(data) == 1
        assert data[0]["faculty"]["employee_id"] == "F1001"
        assert len(data[0]["requests"]) == 2

    def test_faculty_cannot_resolve(self, faculty_client, faculty, project):
        faculty_request = services.create_request(faculty, request_data(project))

        response = faculty_client.put(
            f"/api/admin/requests/{faculty_request.id}/status",
            data={"status": "approved"},
            content_type="application/json",
        )

        assert response.status_code == 403
