"""
Project coordinator administration API controller.
"""

from uuid import UUID

from django.http import HttpRequest
from ninja_extra import api_controller
from ninja_extra import http_delete
from ninja_extra import http_get
from ninja_extra import http_post
from ninja_extra import http_put

from capstone_backend.coordinators import services
from capstone_backend.coordinators.models import ProjectCoordinator
from capstone_backend.coordinators.schemas import PermissionsUpdateSchema
from capstone_backend.coordinators.schemas import ProjectCoordinatorAssignSchema
from capstone_backend.coordinators.schemas import ProjectCoordinatorListResponseSchema
from capstone_backend.coordinators.schemas import ProjectCoordinatorResponseSchema
from capstone_backend.coordinators.schemas import ProjectCoordinatorSchema
from capstone_backend.coordinators.schemas import ProjectCoordinatorUpdateSchema
from capstone_backend.core.api import BaseAPI
from capstone_backend.core.api import IsAdmin
from capstone_backend.core.exceptions import APIException
from capstone_backend.core.exceptions import ErrorSchema
from capstone_backend.core.schemas import SuccessSchema
from capstone_backend.faculty.schemas import FacultySummarySchema


def coordinator_to_schema(coordinator: ProjectCoordinator) -> ProjectCoordinatorSchema:
    return ProjectCoordinatorSchema(
        id=coordinator.id,
        faculty=FacultySummarySchema.from_faculty(coordinator.faculty),
        academic_year=coordinator.academic_year,
        school=coordinator.school,
        department=coordinator.department,
        is_primary=coordinator.is_primary,
        is_active=coordinator.is_active,
        permissions=coordinator.permissions,
        created=coordinator.created,
    )


def _capabilities(permissions) -> dict[str, dict]:
    return {
        capability: entry.model_dump(mode="json", exclude_none=True)
        for capability, entry in permissions.items()
    }


@api_controller("/admin/project-coordinators", tags=["Project coordinators"], permissions=[IsAdmin])
class ProjectCoordinatorAdminController(BaseAPI):
    """Coordinator assignment and capability management."""

    @http_get("", response={200: ProjectCoordinatorListResponseSchema}, url_name="coordinators_list")
    def list_coordinators(
        self,
        request: HttpRequest,
        academic_year: str | None = None,
        school: str | None = None,
        department: str | None = None,
        include_inactive: bool = False,
    ):
        coordinators = list(
            services.list_coordinators(
                academic_year=academic_year,
                school=school,
                department=department,
                include_inactive=include_inactive,
            )
        )
        return 200, ProjectCoordinatorListResponseSchema(
            success=True,
            data=[coordinator_to_schema(c) for c in coordinators],
            count=len(coordinators),
        )

    @http_post(
        "",
        response={201: ProjectCoordinatorResponseSchema, 400: ErrorSchema, 404: ErrorSchema},
        url_name="coordinators_assign",
    )
    def assign_coordinator(self, request: HttpRequest, data: ProjectCoordinatorAssignSchema):
        try:
            coordinator = services.assign_coordinator(
                data.faculty_employee_id,
                data.academic_year,
                data.school,
                data.department,
                is_primary=data.is_primary,
                permissions=_capabilities(data.permissions) if data.permissions else None,
                assigned_by=request.user,
            )
        except APIException as exc:
            return exc.to_response()
        return 201, ProjectCoordinatorResponseSchema(
            success=True,
            message="Project coordinator assigned successfully.",
            data=coordinator_to_schema(coordinator),
        )

    @http_put(
        "/{coordinator_id}",
        response={200: ProjectCoordinatorResponseSchema, 404: ErrorSchema},
        url_name="coordinators_update",
    )
    def update_coordinator(self, request: HttpRequest, coordinator_id: UUID, data: ProjectCoordinatorUpdateSchema):
        try:
            coordinator = services.update_coordinator(
                coordinator_id,
                data.model_dump(exclude_unset=True),
                updated_by=request.user,
            )
        except APIException as exc:
            return exc.to_response()
        return 200, ProjectCoordinatorResponseSchema(
            success=True,
            message="Project coordinator updated successfully.",
            data=coordinator_to_schema(coordinator),
        )

    @http_put(
        "/{coordinator_id}/permissions",
        response={200: ProjectCoordinatorResponseSchema, 400: ErrorSchema, 404: ErrorSchema},
        url_name="coordinators_update_permissions",
    )
    def update_permissions(self, request: HttpRequest, coordinator_id: UUID, data: PermissionsUpdateSchema):
        try:
            coordinator = services.update_permissions(
                coordinator_id,
                _capabilities(data.permissions),
                updated_by=request.user,
            )
        except APIException as exc:
            return exc.to_response()
        return 200, ProjectCoordinatorResponseSchema(
            success=True,
            message="Permissions updated successfully.",
            data=coordinator_to_schema(coordinator),
        )

    @http_delete(
        "/{coordinator_id}",
        response={200: SuccessSchema, 404: ErrorSchema},
        url_name="coordinators_remove",
    )
    def remove_coordinator(self, request: HttpRequest, coordinator_id: UUID):
        try:
            services.remove_coordinator(coordinator_id, removed_by=request.user)
        except APIException as exc:
            return exc.to_response()
        return 200, SuccessSchema(message="Project coordinator removed successfully.")
