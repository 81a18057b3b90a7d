"""
Tests for projects: team creation, listings, guide changes and status.
"""

import pytest

from capstone_backend.academics.services import upsert_department_config
from capstone_backend.coordinators.services import update_permissions
from capstone_backend.core.exceptions import BadRequestError
from capstone_backend.core.exceptions import ConflictError
from capstone_backend.core.exceptions import NotFoundError
from capstone_backend.core.exceptions import ValidationError
from capstone_backend.faculty.tests.factories import FacultyFactory
from capstone_backend.panels.services import assign_panel_to_project
from capstone_backend.panels.tests.factories import PanelFactory
from capstone_backend.projects import services
from capstone_backend.projects.models import Project
from capstone_backend.projects.models import ProjectStatus
from capstone_backend.projects.tests.factories import ProjectFactory
from capstone_backend.students.tests.factories import StudentFactory


def project_data(guide, students, **overrides):
    data = {
        "name": "Campus assistant",
        "academic_year": "2025-2026",
        "school": "SCOPE",
        "department": "CSE",
        "guide_employee_id": guide.employee_id,
        "student_reg_nos": [s.reg_no for s in students],
        "specialization": "AI/ML",
        "project_type": "software",
    }
    data.update(overrides)
    return data


@pytest.mark.django_db
class TestCreateProject:
    def test_creates_team(self):
        guide = FacultyFactory()
        students = StudentFactory.create_batch(2)

        project = services.create_project(project_data(guide, students))

        assert project.status == ProjectStatus.ACTIVE
        assert set(project.students.values_list("reg_no", flat=True)) == {s.reg_no for s in students}

    def test_team_size_follows_config(self):
        upsert_department_config("2025-2026", "SCOPE", "CSE", min_team_size=2, max_team_size=3)

        with pytest.raises(ValidationError, match="Team size must be between 2 and 3."):
            services.create_project(project_data(FacultyFactory(), [StudentFactory()]))

    def test_student_in_active_project(self):
        student = StudentFactory()
        ProjectFactory(students=[student])

        with pytest.raises(ConflictError) as exc_info:
            services.create_project(project_data(FacultyFactory(), [student, StudentFactory()]))

        assert exc_info.value.details == {"students": [student.reg_no]}
        assert Project.objects.count() == 1

    def test_student_of_completed_project_can_join(self):
        student = StudentFactory()
        ProjectFactory(students=[student], status=ProjectStatus.COMPLETED)

        project = services.create_project(project_data(FacultyFactory(), [student]))

        assert project.students.count() == 1

    def test_unknown_students(self):
        with pytest.raises(ValidationError, match="Students not found: 22XXX0001"):
            services.create_project(
                project_data(FacultyFactory(), [], student_reg_nos=["22XXX0001"]),
            )

    def test_student_of_another_year(self):
        student = StudentFactory(academic_year="2024-2025")

        with pytest.raises(ValidationError):
            services.create_project(project_data(FacultyFactory(), [student]))

    def test_inactive_guide(self):
        guide = FacultyFactory(is_active=False)

        with pytest.raises(NotFoundError, match="Guide faculty not found."):
            services.create_project(project_data(guide, [StudentFactory()]))


@pytest.mark.django_db
class TestProjectListings:
    def test_grouped_by_guide(self):
        guide = FacultyFactory()
        ProjectFactory(guide_faculty=guide, name="B")
        ProjectFactory(guide_faculty=guide, name="A")
        ProjectFactory(name="C")

        groups = services.projects_by_guide(academic_year="2025-2026")

        assert len(groups) == 2
        first_guide, projects = groups[0]
        assert first_guide == guide
        assert [p.name for p in projects] == ["A", "B"]

    def test_grouped_by_panel_skips_unassigned(self):
        panel = PanelFactory()
        assigned = ProjectFactory()
        ProjectFactory()
        assign_panel_to_project(panel.id, assigned.id)

        groups = services.projects_by_panel()

        assert [(p.id, [x.id for x in projects]) for p, projects in groups] == [(panel.id, [assigned.id])]

    def test_filter_by_panel_member(self):
        member = FacultyFactory()
        panel = PanelFactory(members=[member])
        project = ProjectFactory()
        ProjectFactory()
        assign_panel_to_project(panel.id, project.id)

        found = services.list_projects(panel_member=member.employee_id)

        assert [p.id for p in found] == [project.id]


@pytest.mark.django_db
class TestReassignGuide:
    def test_reassigns(self):
        project = ProjectFactory()
        new_guide = FacultyFactory()

        services.reassign_guide(project.id, new_guide.employee_id)

        assert Project.objects.get(pk=project.pk).guide_faculty == new_guide

    def test_same_guide(self):
        project = ProjectFactory()

        with pytest.raises(BadRequestError, match="already the guide"):
            services.reassign_guide(project.id, project.guide_faculty.employee_id)

    def test_guide_from_other_department(self):
        project = ProjectFactory()
        outsider = FacultyFactory(departments=["IT"])

        with pytest.raises(BadRequestError, match="school and department"):
            services.reassign_guide(project.id, outsider.employee_id)

    def test_completed_project(self):
        project = ProjectFactory(status=ProjectStatus.COMPLETED)

        with pytest.raises(BadRequestError, match="Only active projects"):
            services.reassign_guide(project.id, FacultyFactory().employee_id)


@pytest.mark.django_db
class TestProjectStatus:
    def test_toggle_best(self):
        project = ProjectFactory()

        assert services.toggle_best_project(project.id).best_project is True
        assert services.toggle_best_project(project.id).best_project is False

    def test_complete(self):
        project = ProjectFactory()

        services.complete_project(project.id)

        completed = Project.objects.get(pk=project.pk)
        assert completed.status == ProjectStatus.COMPLETED
        assert completed.completed_at is not None

    def test_complete_twice(self):
        project = ProjectFactory()
        services.complete_project(project.id)

        with pytest.raises(BadRequestError, match="already completed"):
            services.complete_project(project.id)


@pytest.mark.django_db
class TestProjectAPI:
    """Tests for /api/admin/projects and /api/project-coordinator/projects."""

    def test_create(self, admin_client):
        guide = FacultyFactory()
        student = StudentFactory()

        response = admin_client.post(
            "/api/admin/projects",
            data={
                "name": "Campus assistant",
                "academicYear": "2025-2026",
                "school": "SCOPE",
                "department": "CSE",
                "guideEmployeeId": guide.employee_id,
                "studentRegNos": [student.reg_no],
            },
            content_type="application/json",
        )

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["guide_faculty"]["employee_id"] == guide.employee_id
        assert data["students"][0]["reg_no"] == student.reg_no

    def test_list_by_guide_filter(self, admin_client):
        project = ProjectFactory()
        ProjectFactory()

        response = admin_client.get(
            "/api/admin/projects",
            {"guide_faculty": project.guide_faculty.employee_id},
        )

        assert response.json()["count"] == 1

    def test_toggle_best_message(self, admin_client):
        project = ProjectFactory()

        response = admin_client.patch(f"/api/admin/projects/{project.id}/best")

        assert response.status_code == 200
        assert response.json()["message"] == "Project marked as best project."
        assert response.json()["data"]["best_project"] is True

    def test_reassign_with_frontend_field_name(self, coordinator_client):
        project = ProjectFactory()
        new_guide = FacultyFactory()

        response = coordinator_client.put(
            f"/api/project-coordinator/projects/{project.id}/reassign-guide",
            data={"newGuideFacultyEmpId": new_guide.employee_id},
            content_type="application/json",
        )

        assert response.status_code == 200
        assert response.json()["data"]["guide_faculty"]["employee_id"] == new_guide.employee_id

    def test_reassign_without_permission(self, coordinator, coordinator_client):
        update_permissions(coordinator.id, {"canReassignGuides": {"enabled": False}})
        project = ProjectFactory()

        response = coordinator_client.put(
            f"/api/project-coordinator/projects/{project.id}/reassign-guide",
            data={"guideEmployeeId": FacultyFactory().employee_id},
            content_type="application/json",
        )

        assert response.status_code == 403

    def test_coordinator_outside_scope(self, coordinator_client):
        project = ProjectFactory(department="IT")

        response = coordinator_client.post(f"/api/admin/projects/{project.id}/complete")

        assert response.status_code == 403
