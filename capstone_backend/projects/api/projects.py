"""
Project API controllers.
"""

from uuid import UUID

from django.http import HttpRequest
from ninja_extra import api_controller
from ninja_extra import http_get
from ninja_extra import http_patch
from ninja_extra import http_post
from ninja_extra import http_put

from capstone_backend.coordinators.services import require_capability
from capstone_backend.core.api import BaseAPI
from capstone_backend.core.api import IsAdminOrCoordinator
from capstone_backend.core.exceptions import APIException
from capstone_backend.core.exceptions import ErrorSchema
from capstone_backend.faculty.schemas import FacultySummarySchema
from capstone_backend.panels.api.panels import panel_to_schema
from capstone_backend.projects import services
from capstone_backend.projects.models import Project
from capstone_backend.projects.schemas import BestProjectResponseSchema
from capstone_backend.projects.schemas import BestProjectSchema
from capstone_backend.projects.schemas import GuideProjectsResponseSchema
from capstone_backend.projects.schemas import GuideProjectsSchema
from capstone_backend.projects.schemas import PanelProjectsResponseSchema
from capstone_backend.projects.schemas import PanelProjectsSchema
from capstone_backend.projects.schemas import ProjectCreateSchema
from capstone_backend.projects.schemas import ProjectListResponseSchema
from capstone_backend.projects.schemas import ProjectPanelSchema
from capstone_backend.projects.schemas import ProjectResponseSchema
from capstone_backend.projects.schemas import ProjectSchema
from capstone_backend.projects.schemas import ReassignGuideSchema
from capstone_backend.students.schemas.students import StudentSummarySchema


def project_to_schema(project: Project) -> ProjectSchema:
    panel = project.panel
    return ProjectSchema(
        id=project.id,
        name=project.name,
        academic_year=project.academic_year,
        school=project.school,
        department=project.department,
        specialization=project.specialization,
        project_type=project.project_type,
        status=project.status,
        best_project=project.best_project,
        guide_faculty=FacultySummarySchema.from_faculty(project.guide_faculty),
        students=[StudentSummarySchema.from_student(s) for s in project.students.all()],
        panel=(
            ProjectPanelSchema(id=panel.id, panel_name=panel.panel_name, venue=panel.venue)
            if panel is not None
            else None
        ),
        completed_at=project.completed_at,
        created=project.created,
    )


@api_controller("/admin/projects", tags=["Projects"], permissions=[IsAdminOrCoordinator])
class ProjectAdminController(BaseAPI):
    """Project listings, team creation and status flags."""

    @http_get("", response={200: ProjectListResponseSchema}, url_name="projects_list")
    def list_projects(
        self,
        request: HttpRequest,
        academic_year: str | None = None,
        school: str | None = None,
        department: str | None = None,
        status: str | None = None,
        guide_faculty: str | None = None,
        panel: UUID | None = None,
    ):
        projects = services.list_projects(
            academic_year=academic_year,
            school=school,
            department=department,
            status=status,
            guide_employee_id=guide_faculty,
            panel_id=panel,
        )
        return 200, ProjectListResponseSchema(
            success=True,
            data=[project_to_schema(p) for p in projects],
            count=len(projects),
        )

    @http_post(
        "",
        response={201: ProjectResponseSchema, 400: ErrorSchema, 403: ErrorSchema, 404: ErrorSchema, 409: ErrorSchema},
        url_name="projects_create",
    )
    def create_project(self, request: HttpRequest, data: ProjectCreateSchema):
        """Create a team under a guide from already-uploaded students."""
        try:
            require_capability(request.user, "canAssignGuides", data.academic_year, data.school, data.department)
            project = services.create_project(data.model_dump(), created_by=request.user)
        except APIException as exc:
            return exc.to_response()
        return 201, ProjectResponseSchema(
            success=True,
            message="Project created successfully.",
            data=project_to_schema(services.get_project(project.id)),
        )

    @http_get("/guides", response={200: GuideProjectsResponseSchema}, url_name="projects_by_guide")
    def list_by_guide(
        self,
        request: HttpRequest,
        academic_year: str | None = None,
        school: str | None = None,
        department: str | None = None,
    ):
        """Projects grouped under their guide."""
        groups = services.projects_by_guide(academic_year=academic_year, school=school, department=department)
        return 200, GuideProjectsResponseSchema(
            success=True,
            data=[
                GuideProjectsSchema(
                    faculty=FacultySummarySchema.from_faculty(guide),
                    guided_projects=[project_to_schema(p) for p in projects],
                )
                for guide, projects in groups
            ],
        )

    @http_get("/panels", response={200: PanelProjectsResponseSchema}, url_name="projects_by_panel")
    def list_by_panel(
        self,
        request: HttpRequest,
        academic_year: str | None = None,
        school: str | None = None,
        department: str | None = None,
        faculty_id: str | None = None,
    ):
        """Projects grouped under their panel; unassigned projects are not listed."""
        groups = services.projects_by_panel(
            academic_year=academic_year,
            school=school,
            department=department,
            panel_member=faculty_id,
        )
        data = []
        for panel, projects in groups:
            panel_data = panel_to_schema(panel)
            data.append(
                PanelProjectsSchema(
                    panel_id=panel.id,
                    panel_name=panel.panel_name,
                    members=panel_data.members,
                    venue=panel.venue,
                    school=panel.school,
                    department=panel.department,
                    projects=[project_to_schema(p) for p in projects],
                )
            )
        return 200, PanelProjectsResponseSchema(success=True, data=data)

    @http_patch(
        "/{project_id}/best",
        response={200: BestProjectResponseSchema, 404: ErrorSchema},
        url_name="projects_toggle_best",
    )
    def toggle_best(self, request: HttpRequest, project_id: UUID):
        try:
            project = services.toggle_best_project(project_id, updated_by=request.user)
        except APIException as exc:
            return exc.to_response()
        state = "marked" if project.best_project else "unmarked"
        return 200, BestProjectResponseSchema(
            success=True,
            message=f"Project {state} as best project.",
            data=BestProjectSchema(best_project=project.best_project),
        )

    @http_post(
        "/{project_id}/complete",
        response={200: ProjectResponseSchema, 400: ErrorSchema, 403: ErrorSchema, 404: ErrorSchema},
        url_name="projects_complete",
    )
    def complete(self, request: HttpRequest, project_id: UUID):
        try:
            project = services.get_project(project_id)
            require_capability(request.user, "canEdit", project.academic_year, project.school, project.department)
            project = services.complete_project(project_id, completed_by=request.user)
        except APIException as exc:
            return exc.to_response()
        return 200, ProjectResponseSchema(
            success=True,
            message="Project marked as completed.",
            data=project_to_schema(project),
        )


@api_controller("/project-coordinator/projects", tags=["Projects"], permissions=[IsAdminOrCoordinator])
class ProjectCoordinatorController(BaseAPI):
    """Project changes a coordinator makes within their own scope."""

    @http_put(
        "/{project_id}/reassign-guide",
        response={200: ProjectResponseSchema, 400: ErrorSchema, 403: ErrorSchema, 404: ErrorSchema},
        url_name="projects_reassign_guide",
    )
    def reassign_guide(self, request: HttpRequest, project_id: UUID, data: ReassignGuideSchema):
        try:
            project = services.get_project(project_id)
            require_capability(
                request.user,
                "canReassignGuides",
                project.academic_year,
                project.school,
                project.department,
            )
            project = services.reassign_guide(project_id, data.guide_employee_id, reassigned_by=request.user)
        except APIException as exc:
            return exc.to_response()
        return 200, ProjectResponseSchema(
            success=True,
            message="Guide reassigned successfully.",
            data=project_to_schema(project),
        )
