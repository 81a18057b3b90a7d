"""
Panel administration API controller.
"""

from uuid import UUID

from django.http import HttpRequest
from ninja_extra import api_controller
from ninja_extra import http_delete
from ninja_extra import http_get
from ninja_extra import http_post
from ninja_extra import http_put

from capstone_backend.coordinators.services import require_capability
from capstone_backend.core.api import BaseAPI
from capstone_backend.core.api import IsAdminOrCoordinator
from capstone_backend.core.exceptions import APIException
from capstone_backend.core.exceptions import ErrorSchema
from capstone_backend.core.schemas import BatchResponseSchema
from capstone_backend.core.schemas import BatchResultSchema
from capstone_backend.core.schemas import SuccessSchema
from capstone_backend.panels import services
from capstone_backend.panels.models import Panel
from capstone_backend.panels.schemas import AutoAssignSchema
from capstone_backend.panels.schemas import AutoCreateSchema
from capstone_backend.panels.schemas import PanelAssignResponseSchema
from capstone_backend.panels.schemas import PanelAssignSchema
from capstone_backend.panels.schemas import PanelAssignmentSchema
from capstone_backend.panels.schemas import PanelCreateSchema
from capstone_backend.panels.schemas import PanelListResponseSchema
from capstone_backend.panels.schemas import PanelMemberSchema
from capstone_backend.panels.schemas import PanelMembersUpdateSchema
from capstone_backend.panels.schemas import PanelResponseSchema
from capstone_backend.panels.schemas import PanelSchema
from capstone_backend.panels.schemas import PanelUpdateSchema
from capstone_backend.panels.schemas import TaskQueuedSchema
from capstone_backend.panels.tasks import auto_assign_panels_task
from capstone_backend.panels.tasks import auto_create_panels_task
from capstone_backend.projects.services import get_project


def panel_to_schema(panel: Panel) -> PanelSchema:
    """Convert Panel to schema, members in chair-first order."""
    return PanelSchema(
        id=panel.id,
        panel_name=panel.panel_name,
        academic_year=panel.academic_year,
        school=panel.school,
        department=panel.department,
        venue=panel.venue,
        specializations=panel.specializations,
        panel_type=panel.panel_type,
        max_projects=panel.max_projects,
        assigned_projects_count=panel.assigned_projects_count,
        is_active=panel.is_active,
        members=[
            PanelMemberSchema(
                employee_id=m.faculty.employee_id,
                name=m.faculty.name,
                email_id=m.faculty.email_id,
                role=m.role,
                position=m.position,
            )
            for m in sorted(panel.memberships.all(), key=lambda m: m.position)
        ],
        created=panel.created,
    )


def _require_panel_scope(user, scoped) -> None:
    """``canCreatePanels`` in the scope of a panel or project."""
    require_capability(user, "canCreatePanels", scoped.academic_year, scoped.school, scoped.department)


@api_controller("/admin/panels", tags=["Panels"], permissions=[IsAdminOrCoordinator])
class PanelAdminController(BaseAPI):
    """Panel creation, membership, assignment and batch operations."""

    @http_post(
        "",
        response={201: PanelResponseSchema, 400: ErrorSchema, 403: ErrorSchema},
        url_name="panels_create",
    )
    def create_panel(self, request: HttpRequest, data: PanelCreateSchema):
        """Create a panel; the first listed member chairs it."""
        try:
            require_capability(request.user, "canCreatePanels", data.academic_year, data.school, data.department)
            panel = services.create_panel(data.model_dump(), created_by=request.user)
        except APIException as exc:
            return exc.to_response()
        return 201, PanelResponseSchema(
            success=True,
            message="Panel created successfully.",
            data=panel_to_schema(panel),
        )

    @http_get("", response={200: PanelListResponseSchema}, url_name="panels_list")
    def list_panels(
        self,
        request: HttpRequest,
        academic_year: str | None = None,
        school: str | None = None,
        department: str | None = None,
        specialization: str | None = None,
        include_inactive: bool = False,
    ):
        """List active panels, optionally filtered by scope and specialization."""
        panels = services.get_panel_list(
            academic_year=academic_year,
            school=school,
            department=department,
            specialization=specialization,
            include_inactive=include_inactive,
        )
        return 200, PanelListResponseSchema(
            success=True,
            data=[panel_to_schema(p) for p in panels],
            count=len(panels),
        )

    @http_post(
        "/assign",
        response={200: PanelAssignResponseSchema, 400: ErrorSchema, 403: ErrorSchema, 404: ErrorSchema},
        url_name="panels_assign",
    )
    def assign_panel(self, request: HttpRequest, data: PanelAssignSchema):
        """Assign a panel to a project, taking one of the panel's slots."""
        try:
            _require_panel_scope(request.user, services.get_panel(data.panel_id))
            _require_panel_scope(request.user, get_project(data.project_id))
            panel, project = services.assign_panel_to_project(
                data.panel_id,
                data.project_id,
                assigned_by=request.user,
            )
        except APIException as exc:
            return exc.to_response()
        return 200, PanelAssignResponseSchema(
            success=True,
            message="Panel assigned successfully.",
            data=PanelAssignmentSchema(
                panel_id=panel.id,
                project_id=project.id,
                assigned_projects_count=panel.assigned_projects_count,
                max_projects=panel.max_projects,
            ),
        )

    @http_post(
        "/auto-create",
        response={200: BatchResponseSchema, 202: TaskQueuedSchema, 403: ErrorSchema},
        url_name="panels_auto_create",
    )
    def auto_create_panels(self, request: HttpRequest, data: AutoCreateSchema):
        """
        Create panels for several departments from faculty specializations.

        With ``background`` set the run is queued on Celery and the task id
        is returned instead of the batch result.
        """
        try:
            for department in data.departments:
                require_capability(request.user, "canCreatePanels", data.academic_year, data.school, department)
        except APIException as exc:
            return exc.to_response()

        if data.background:
            task = auto_create_panels_task.delay(
                data.departments,
                data.school,
                data.academic_year,
                panel_size=data.panel_size,
                user_id=str(request.user.id),
            )
            return 202, TaskQueuedSchema(message="Panel auto-creation queued.", task_id=task.id)

        result = services.auto_create_panels(
            data.departments,
            data.school,
            data.academic_year,
            panel_size=data.panel_size,
            created_by=request.user,
        )
        return 200, BatchResponseSchema(
            success=True,
            message=f"Auto-creation complete: {result.created} panels created, {result.errors} errors.",
            data=BatchResultSchema(**result.to_dict()),
        )

    @http_post(
        "/auto-assign",
        response={200: BatchResponseSchema, 202: TaskQueuedSchema, 403: ErrorSchema},
        url_name="panels_auto_assign",
    )
    def auto_assign_panels(self, request: HttpRequest, data: AutoAssignSchema):
        """Assign the least-loaded matching panel to every project without one."""
        try:
            require_capability(request.user, "canCreatePanels", data.academic_year, data.school, data.department)
        except APIException as exc:
            return exc.to_response()

        if data.background:
            task = auto_assign_panels_task.delay(
                data.academic_year,
                data.school,
                data.department,
                user_id=str(request.user.id),
            )
            return 202, TaskQueuedSchema(message="Panel auto-assignment queued.", task_id=task.id)

        result = services.auto_assign_panels_to_projects(
            data.academic_year,
            data.school,
            data.department,
            assigned_by=request.user,
        )
        return 200, BatchResponseSchema(
            success=True,
            message=f"Auto-assignment complete: {result.assigned} projects assigned, {result.errors} errors.",
            data=BatchResultSchema(**result.to_dict()),
        )

    @http_put(
        "/{panel_id}",
        response={200: PanelResponseSchema, 400: ErrorSchema, 403: ErrorSchema, 404: ErrorSchema},
        url_name="panels_update",
    )
    def update_panel(self, request: HttpRequest, panel_id: UUID, data: PanelUpdateSchema):
        try:
            _require_panel_scope(request.user, services.get_panel(panel_id))
            panel = services.update_panel(panel_id, data.model_dump(exclude_unset=True), updated_by=request.user)
        except APIException as exc:
            return exc.to_response()
        return 200, PanelResponseSchema(
            success=True,
            message="Panel updated successfully.",
            data=panel_to_schema(panel),
        )

    @http_put(
        "/{panel_id}/members",
        response={200: PanelResponseSchema, 400: ErrorSchema, 403: ErrorSchema, 404: ErrorSchema},
        url_name="panels_update_members",
    )
    def update_members(self, request: HttpRequest, panel_id: UUID, data: PanelMembersUpdateSchema):
        """Replace the members of a panel; the first listed member chairs it."""
        try:
            _require_panel_scope(request.user, services.get_panel(panel_id))
            panel = services.update_panel_members(panel_id, data.member_employee_ids, updated_by=request.user)
        except APIException as exc:
            return exc.to_response()
        return 200, PanelResponseSchema(
            success=True,
            message="Panel members updated successfully.",
            data=panel_to_schema(panel),
        )

    @http_delete(
        "/{panel_id}",
        response={200: SuccessSchema, 400: ErrorSchema, 403: ErrorSchema, 404: ErrorSchema},
        url_name="panels_delete",
    )
    def delete_panel(self, request: HttpRequest, panel_id: UUID):
        try:
            _require_panel_scope(request.user, services.get_panel(panel_id))
            services.delete_panel(panel_id, deleted_by=request.user)
        except APIException as exc:
            return exc.to_response()
        return 200, SuccessSchema(message="Panel deleted successfully.")
