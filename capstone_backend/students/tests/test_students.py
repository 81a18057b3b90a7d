"""
Tests for the student roster.
"""

import pytest

from capstone_backend.coordinators.services import update_permissions
from capstone_backend.students import services
from capstone_backend.students.models import Student
from capstone_backend.students.tests.factories import StudentFactory

YEAR, SCHOOL, DEPARTMENT = "2025-2026", "SCOPE", "CSE"


@pytest.mark.django_db
class TestUploadStudents:
    def test_creates_and_updates(self):
        StudentFactory(reg_no="22BCE1001", department="IT", name="Old Name")

        result = services.upload_students(
            [
                {"reg_no": "22BCE1001", "name": "Aditi Sharma", "email_id": "Aditi@students.edu"},
                {"reg_no": "22BCE1002", "name": "Karan Patel", "email_id": "karan@students.edu"},
            ],
            YEAR,
            SCHOOL,
            DEPARTMENT,
        )

        assert (result.created, result.updated, result.errors) == (1, 1, 0)
        moved = Student.objects.get(reg_no="22BCE1001", academic_year=YEAR)
        assert moved.department == "CSE"
        assert moved.email_id == "aditi@students.edu"

    def test_incomplete_rows_are_reported(self):
        result = services.upload_students(
            [{"reg_no": "22BCE1001", "name": "Aditi Sharma"}],
            YEAR,
            SCHOOL,
            DEPARTMENT,
        )

        assert result.errors == 1
        assert result.details[0]["reg_no"] == "22BCE1001"
        assert not Student.objects.exists()

    def test_same_reg_no_in_another_year_is_a_new_student(self):
        StudentFactory(reg_no="22BCE1001", academic_year="2024-2025")

        result = services.upload_students(
            [{"reg_no": "22BCE1001", "name": "Aditi Sharma", "email_id": "aditi@students.edu"}],
            YEAR,
            SCHOOL,
            DEPARTMENT,
        )

        assert result.created == 1
        assert Student.objects.filter(reg_no="22BCE1001").count() == 2


@pytest.mark.django_db
class TestStudentAPI:
    """Tests for /api/admin/students."""

    def upload(self, client):
        return client.post(
            "/api/admin/students/upload",
            data={
                "academicYear": YEAR,
                "school": SCHOOL,
                "department": DEPARTMENT,
                "students": [{"regNo": "22BCE1001", "name": "Aditi Sharma", "emailId": "aditi@students.edu"}],
            },
            content_type="application/json",
        )

    def test_admin_uploads(self, admin_client):
        response = self.upload(admin_client)

        assert response.status_code == 200
        assert response.json()["data"]["created"] == 1

    def test_coordinator_needs_upload_permission(self, coordinator, coordinator_client):
        update_permissions(coordinator.id, {"canUploadStudents": {"enabled": False}})

        response = self.upload(coordinator_client)

        assert response.status_code == 403
        assert not Student.objects.exists()

    def test_list_filters_by_reg_no(self, admin_client):
        StudentFactory(reg_no="22BCE1001")
        StudentFactory(reg_no="22BIT2001")

        response = admin_client.get("/api/admin/students", {"academic_year": YEAR, "reg_no": "bce"})

        assert response.status_code == 200
        assert [s["reg_no"] for s in response.json()["data"]] == ["22BCE1001"]
