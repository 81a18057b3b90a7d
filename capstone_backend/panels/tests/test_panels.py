"""
Tests for review panels: membership, capacity and batch operations.
"""

import pytest

from capstone_backend.academics.services import upsert_department_config
from capstone_backend.coordinators.services import update_permissions
from capstone_backend.core.exceptions import BadRequestError
from capstone_backend.core.exceptions import CapacityError
from capstone_backend.core.exceptions import ValidationError
from capstone_backend.faculty.tests.factories import FacultyFactory
from capstone_backend.panels import services
from capstone_backend.panels.models import MemberRole
from capstone_backend.panels.models import Panel
from capstone_backend.panels.tasks import auto_assign_panels_task
from capstone_backend.panels.tasks import auto_create_panels_task
from capstone_backend.panels.tests.factories import PanelFactory
from capstone_backend.projects.models import Project
from capstone_backend.projects.tests.factories import ProjectFactory

SCOPE = {"academic_year": "2025-2026", "school": "SCOPE", "department": "CSE"}


@pytest.mark.django_db
class TestValidatePanelMembers:
    def test_keeps_input_order(self):
        FacultyFactory(employee_id="F0002")
        FacultyFactory(employee_id="F0001")

        members = services.validate_panel_members(["F0002", "F0001"], **SCOPE)

        assert [f.employee_id for f in members] == ["F0002", "F0001"]

    def test_lists_every_unknown_id(self):
        FacultyFactory(employee_id="F0001")

        with pytest.raises(ValidationError) as exc_info:
            services.validate_panel_members(["F0001", "F9998", "F9999"], **SCOPE)

        assert exc_info.value.details == {"missing": ["F9998", "F9999"]}

    def test_duplicates_rejected(self):
        FacultyFactory(employee_id="F0001")

        with pytest.raises(ValidationError, match="Duplicate"):
            services.validate_panel_members(["F0001", "F0001"], **SCOPE)

    def test_size_follows_department_config(self):
        upsert_department_config(*SCOPE.values(), min_panel_size=2, max_panel_size=3)
        FacultyFactory(employee_id="F0001")

        with pytest.raises(ValidationError, match="between 2 and 3"):
            services.validate_panel_members(["F0001"], **SCOPE)


@pytest.mark.django_db
class TestCreatePanel:
    def test_first_member_chairs(self):
        FacultyFactory(employee_id="F0001")
        FacultyFactory(employee_id="F0002")

        panel = services.create_panel({**SCOPE, "member_employee_ids": ["F0002", "F0001"]})

        chair = panel.memberships.get(role=MemberRole.CHAIR)
        assert chair.faculty.employee_id == "F0002"
        assert panel.panel_name == "CSE-Panel-1"
        assert panel.max_projects == 10

    def test_max_projects_defaults_from_config(self):
        upsert_department_config(*SCOPE.values(), max_panel_size=4)
        FacultyFactory(employee_id="F0001")

        panel = services.create_panel({**SCOPE, "member_employee_ids": ["F0001"]})

        assert panel.max_projects == 8


@pytest.mark.django_db
class TestAssignPanel:
    """Panel assignment keeps the assigned counter within capacity."""

    def test_assign_takes_a_slot(self):
        panel = PanelFactory(max_projects=2)
        project = ProjectFactory()

        panel, project = services.assign_panel_to_project(panel.id, project.id)

        assert panel.assigned_projects_count == 1
        assert Project.objects.get(pk=project.pk).panel_id == panel.id

    def test_full_panel_rejects(self):
        panel = PanelFactory(max_projects=5)
        for _ in range(5):
            services.assign_panel_to_project(panel.id, ProjectFactory().id)
        project = ProjectFactory()

        with pytest.raises(CapacityError, match="Panel has reached maximum capacity."):
            services.assign_panel_to_project(panel.id, project.id)

        assert Panel.objects.get(pk=panel.pk).assigned_projects_count == 5
        assert Project.objects.get(pk=project.pk).panel_id is None

    def test_moving_releases_previous_slot(self):
        first, second = PanelFactory(), PanelFactory()
        project = ProjectFactory()
        services.assign_panel_to_project(first.id, project.id)

        services.assign_panel_to_project(second.id, project.id)

        assert Panel.objects.get(pk=first.pk).assigned_projects_count == 0
        assert Panel.objects.get(pk=second.pk).assigned_projects_count == 1

    def test_reassigning_same_panel_is_a_no_op(self):
        panel = PanelFactory(max_projects=2)
        project = ProjectFactory()
        services.assign_panel_to_project(panel.id, project.id)

        panel, _ = services.assign_panel_to_project(panel.id, project.id)

        assert panel.assigned_projects_count == 1

    def test_full_panel_rejects_its_own_project(self):
        panel = PanelFactory(max_projects=5)
        projects = [ProjectFactory() for _ in range(5)]
        for project in projects:
            services.assign_panel_to_project(panel.id, project.id)

        with pytest.raises(CapacityError, match="Panel has reached maximum capacity."):
            services.assign_panel_to_project(panel.id, projects[0].id)

        assert Panel.objects.get(pk=panel.pk).assigned_projects_count == 5
        assert Project.objects.get(pk=projects[0].pk).panel_id == panel.id

    def test_inactive_panel(self):
        panel = PanelFactory(is_active=False, max_projects=1, assigned_projects_count=1)

        with pytest.raises(BadRequestError, match="not active"):
            services.assign_panel_to_project(panel.id, ProjectFactory().id)


@pytest.mark.django_db
class TestUpdateAndDeletePanel:
    def test_max_projects_not_below_assigned(self):
        panel = PanelFactory()
        services.assign_panel_to_project(panel.id, ProjectFactory().id)
        services.assign_panel_to_project(panel.id, ProjectFactory().id)

        with pytest.raises(ValidationError):
            services.update_panel(panel.id, {"max_projects": 1})

    def test_replace_members(self):
        old = FacultyFactory()
        new_chair, new_member = FacultyFactory(), FacultyFactory()
        panel = PanelFactory(members=[old])

        services.update_panel_members(panel.id, [new_chair.employee_id, new_member.employee_id])

        memberships = list(panel.memberships.order_by("position"))
        assert [m.faculty_id for m in memberships] == [new_chair.pk, new_member.pk]
        assert memberships[0].role == MemberRole.CHAIR

    def test_delete_refused_while_referenced(self):
        panel = PanelFactory()
        services.assign_panel_to_project(panel.id, ProjectFactory().id)

        with pytest.raises(BadRequestError, match="1 assigned projects"):
            services.delete_panel(panel.id)

    def test_delete(self):
        panel = PanelFactory()

        services.delete_panel(panel.id)

        assert not Panel.objects.filter(pk=panel.pk).exists()


@pytest.mark.django_db
class TestAutoCreatePanels:
    def test_groups_by_specialization(self):
        for _ in range(5):
            FacultyFactory(specializations=["AI/ML"])
        FacultyFactory(specializations=["Security"])

        result = services.auto_create_panels(["CSE"], "SCOPE", "2025-2026", panel_size=2)

        assert result.created == 2
        panels = Panel.objects.filter(**SCOPE)
        assert all(p.specializations == ["AI/ML"] for p in panels)
        assert all(p.memberships.count() == 2 for p in panels)

    def test_department_without_enough_faculty(self):
        FacultyFactory()

        result = services.auto_create_panels(["CSE", "IT"], "SCOPE", "2025-2026", panel_size=2)

        assert result.created == 0
        assert result.errors == 2
        assert result.details[0]["error"] == "Not enough faculty. Need 2, found 1"

    def test_admins_are_not_panelled(self):
        FacultyFactory(role="admin")
        FacultyFactory(role="admin")

        result = services.auto_create_panels(["CSE"], "SCOPE", "2025-2026", panel_size=2)

        assert result.created == 0


@pytest.mark.django_db
class TestAutoAssignPanels:
    def test_never_exceeds_capacity(self):
        panel = PanelFactory(max_projects=2, specializations=["AI/ML"])
        for _ in range(3):
            ProjectFactory(specialization="AI/ML")

        result = services.auto_assign_panels_to_projects(*SCOPE.values())

        assert result.assigned == 2
        assert result.errors == 1
        assert Panel.objects.get(pk=panel.pk).assigned_projects_count == 2

    def test_prefers_least_loaded_panel(self):
        busy = PanelFactory(specializations=["AI/ML"])
        idle = PanelFactory(specializations=["AI/ML"])
        services.assign_panel_to_project(busy.id, ProjectFactory().id)
        project = ProjectFactory()

        services.auto_assign_panels_to_projects(*SCOPE.values())

        assert Project.objects.get(pk=project.pk).panel_id == idle.id

    def test_specialization_must_match(self):
        PanelFactory(specializations=["Security"])
        ProjectFactory(specialization="AI/ML")

        result = services.auto_assign_panels_to_projects(*SCOPE.values())

        assert result.assigned == 0
        assert result.details[0]["error"] == "No available panel found"

    def test_unexpected_error_only_skips_that_project(self, monkeypatch):
        PanelFactory(specializations=["AI/ML"])
        broken = ProjectFactory(specialization="AI/ML")
        healthy = ProjectFactory(specialization="AI/ML")
        find_available_panel = services.find_available_panel

        def failing_for_broken(project):
            if project.pk == broken.pk:
                raise RuntimeError("malformed specializations")
            return find_available_panel(project)

        monkeypatch.setattr(services, "find_available_panel", failing_for_broken)

        result = services.auto_assign_panels_to_projects(*SCOPE.values())

        assert result.assigned == 1
        assert result.errors == 1
        assert result.details[0]["project_id"] == str(broken.id)
        assert Project.objects.get(pk=healthy.pk).panel_id is not None
        assert Project.objects.get(pk=broken.pk).panel_id is None


@pytest.mark.django_db
class TestPanelTasks:
    def test_auto_create_task(self, admin_user):
        FacultyFactory()
        FacultyFactory()

        result = auto_create_panels_task.apply(
            args=[["CSE"], "SCOPE", "2025-2026"],
            kwargs={"panel_size": 2, "user_id": str(admin_user.id)},
        ).get()

        assert result["success"] is True
        assert result["created"] == 1
        assert Panel.objects.get().created_by == admin_user

    def test_auto_assign_task(self):
        PanelFactory(specializations=["AI/ML"])
        ProjectFactory(specialization="AI/ML")

        result = auto_assign_panels_task.apply(args=list(SCOPE.values())).get()

        assert result["assigned"] == 1


@pytest.mark.django_db
class TestPanelAPI:
    """Tests for /api/admin/panels."""

    def test_create_with_type_alias(self, admin_client):
        FacultyFactory(employee_id="F0001")

        response = admin_client.post(
            "/api/admin/panels",
            data={
                "academicYear": "2025-2026",
                "school": "SCOPE",
                "department": "CSE",
                "memberEmployeeIds": ["F0001"],
                "type": "temporary",
            },
            content_type="application/json",
        )

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["panel_type"] == "temporary"
        assert data["members"][0]["role"] == "chair"

    def test_assign_full_panel(self, admin_client):
        panel = PanelFactory(max_projects=1)
        services.assign_panel_to_project(panel.id, ProjectFactory().id)

        response = admin_client.post(
            "/api/admin/panels/assign",
            data={"panelId": str(panel.id), "projectId": str(ProjectFactory().id)},
            content_type="application/json",
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Panel has reached maximum capacity."

    def test_coordinator_without_panel_permission(self, coordinator, coordinator_client):
        update_permissions(coordinator.id, {"canCreatePanels": {"enabled": False}})

        response = coordinator_client.post(
            "/api/admin/panels/auto-assign",
            data={"academicYear": "2025-2026", "school": "SCOPE", "department": "CSE"},
            content_type="application/json",
        )

        assert response.status_code == 403

    def test_list_filters_by_specialization(self, admin_client):
        PanelFactory(specializations=["AI/ML"])
        PanelFactory(specializations=["Security"])

        response = admin_client.get("/api/admin/panels", {"specialization": "Security"})

        assert response.json()["count"] == 1

    def test_coordinator_cannot_touch_panels_of_another_scope(self, coordinator_client):
        panel = PanelFactory(school="OTHER", department="ECE")
        project = ProjectFactory(school="OTHER", department="ECE")

        assign = coordinator_client.post(
            "/api/admin/panels/assign",
            data={"panelId": str(panel.id), "projectId": str(project.id)},
            content_type="application/json",
        )
        update = coordinator_client.put(
            f"/api/admin/panels/{panel.id}",
            data={"venue": "Lab 2"},
            content_type="application/json",
        )
        delete = coordinator_client.delete(f"/api/admin/panels/{panel.id}")

        assert assign.status_code == 403
        assert update.status_code == 403
        assert delete.status_code == 403
        assert Panel.objects.filter(pk=panel.pk).exists()
        assert Project.objects.get(pk=project.pk).panel_id is None

    def test_coordinator_cannot_assign_other_scope_project(self, coordinator_client):
        panel = PanelFactory()
        project = ProjectFactory(school="OTHER", department="ECE")

        response = coordinator_client.post(
            "/api/admin/panels/assign",
            data={"panelId": str(panel.id), "projectId": str(project.id)},
            content_type="application/json",
        )

        assert response.status_code == 403
        assert Panel.objects.get(pk=panel.pk).assigned_projects_count == 0

    def test_disabled_panel_permission_blocks_mutations(self, coordinator, coordinator_client):
        update_permissions(coordinator.id, {"canCreatePanels": {"enabled": False}})
        panel = PanelFactory()
        project = ProjectFactory()

        assign = coordinator_client.post(
            "/api/admin/panels/assign",
            data={"panelId": str(panel.id), "projectId": str(project.id)},
            content_type="application/json",
        )
        members = coordinator_client.put(
            f"/api/admin/panels/{panel.id}/members",
            data={"memberEmployeeIds": [coordinator.faculty.employee_id]},
            content_type="application/json",
        )
        delete = coordinator_client.delete(f"/api/admin/panels/{panel.id}")

        assert assign.status_code == 403
        assert members.status_code == 403
        assert delete.status_code == 403
        assert Panel.objects.filter(pk=panel.pk).exists()

    def test_coordinator_manages_panels_of_own_scope(self, coordinator_client):
        panel = PanelFactory()
        project = ProjectFactory()

        assign = coordinator_client.post(
            "/api/admin/panels/assign",
            data={"panelId": str(panel.id), "projectId": str(project.id)},
            content_type="application/json",
        )

        assert assign.status_code == 200
        assert assign.json()["data"]["assigned_projects_count"] == 1

    def test_auto_assign_in_background(self, admin_client):
        PanelFactory(specializations=["AI/ML"])
        project = ProjectFactory(specialization="AI/ML")

        response = admin_client.post(
            "/api/admin/panels/auto-assign",
            data={"academicYear": "2025-2026", "school": "SCOPE", "department": "CSE", "background": True},
            content_type="application/json",
        )

        assert response.status_code == 202
        assert response.json()["task_id"]
        assert Project.objects.get(pk=project.pk).panel_id is not None

    def test_auto_create_in_background(self, admin_client):
        FacultyFactory()
        FacultyFactory()

        response = admin_client.post(
            "/api/admin/panels/auto-create",
            data={
                "departments": ["CSE"],
                "school": "SCOPE",
                "academicYear": "2025-2026",
                "panelSize": 2,
                "background": True,
            },
            content_type="application/json",
        )

        assert response.status_code == 202
        assert Panel.objects.count() == 1
