"""
Broadcast API controllers.
"""

from uuid import UUID

from django.http import HttpRequest
from ninja_extra import api_controller
from ninja_extra import http_delete
from ninja_extra import http_get
from ninja_extra import http_post
from ninja_extra import http_put

from capstone_backend.broadcasts import services
from capstone_backend.broadcasts.models import BroadcastMessage
from capstone_backend.broadcasts.schemas import BroadcastCreateSchema
from capstone_backend.broadcasts.schemas import BroadcastListResponseSchema
from capstone_backend.broadcasts.schemas import BroadcastResponseSchema
from capstone_backend.broadcasts.schemas import BroadcastSchema
from capstone_backend.broadcasts.schemas import BroadcastUpdateSchema
from capstone_backend.core.api import BaseAPI
from capstone_backend.core.api import IsAdmin
from capstone_backend.core.api import IsFaculty
from capstone_backend.core.exceptions import APIException
from capstone_backend.core.exceptions import ErrorSchema
from capstone_backend.core.schemas import SuccessSchema
from capstone_backend.faculty.services import get_faculty_for_user


def broadcast_to_schema(broadcast: BroadcastMessage) -> BroadcastSchema:
    return BroadcastSchema(
        id=broadcast.id,
        title=broadcast.title,
        message=broadcast.message,
        target_schools=broadcast.target_schools,
        target_departments=broadcast.target_departments,
        target_academic_years=broadcast.target_academic_years,
        created_by_employee_id=broadcast.created_by_employee_id,
        created_by_name=broadcast.created_by_name,
        expires_at=broadcast.expires_at,
        is_active=broadcast.is_active,
        action=broadcast.action,
        priority=broadcast.priority,
        created=broadcast.created,
    )


@api_controller("/admin/broadcasts", tags=["Broadcasts"], permissions=[IsAdmin])
class BroadcastAdminController(BaseAPI):
    """Broadcast notices to faculty."""

    @http_get("", response={200: BroadcastListResponseSchema}, url_name="broadcasts_list")
    def list_broadcasts(
        self,
        request: HttpRequest,
        is_active: bool | None = None,
        action: str | None = None,
        school: str | None = None,
        department: str | None = None,
        academic_year: str | None = None,
    ):
        broadcasts = services.list_broadcasts(
            is_active=is_active,
            action=action,
            school=school,
            department=department,
            academic_year=academic_year,
        )
        return 200, BroadcastListResponseSchema(
            success=True,
            data=[broadcast_to_schema(b) for b in broadcasts],
            count=len(broadcasts),
        )

    @http_post(
        "",
        response={201: BroadcastResponseSchema, 400: ErrorSchema},
        url_name="broadcasts_create",
    )
    def create_broadcast(self, request: HttpRequest, data: BroadcastCreateSchema):
        try:
            broadcast = services.create_broadcast(data.model_dump(), created_by=request.user)
        except APIException as exc:
            return exc.to_response()
        return 201, BroadcastResponseSchema(
            success=True,
            message="Broadcast created successfully.",
            data=broadcast_to_schema(broadcast),
        )

    @http_put(
        "/{broadcast_id}",
        response={200: BroadcastResponseSchema, 400: ErrorSchema, 404: ErrorSchema},
        url_name="broadcasts_update",
    )
    def update_broadcast(self, request: HttpRequest, broadcast_id: UUID, data: BroadcastUpdateSchema):
        try:
            broadcast = services.update_broadcast(
                broadcast_id,
                data.model_dump(exclude_unset=True),
                updated_by=request.user,
            )
        except APIException as exc:
            return exc.to_response()
        return 200, BroadcastResponseSchema(
            success=True,
            message="Broadcast updated successfully.",
            data=broadcast_to_schema(broadcast),
        )

    @http_delete(
        "/{broadcast_id}",
        response={200: SuccessSchema, 404: ErrorSchema},
        url_name="broadcasts_delete",
    )
    def delete_broadcast(self, request: HttpRequest, broadcast_id: UUID):
        try:
            services.delete_broadcast(broadcast_id, deleted_by=request.user)
        except APIException as exc:
            return exc.to_response()
        return 200, SuccessSchema(message="Broadcast deleted successfully.")


@api_controller("/faculty/broadcasts", tags=["Broadcasts"], permissions=[IsFaculty])
class FacultyBroadcastController(BaseAPI):
    @http_get("", response={200: BroadcastListResponseSchema, 404: ErrorSchema}, url_name="broadcasts_active")
    def active_broadcasts(self, request: HttpRequest, academic_year: str | None = None):
        """Active broadcasts addressed to the current faculty member."""
        try:
            faculty = get_faculty_for_user(request.user)
        except APIException as exc:
            return exc.to_response()
        broadcasts = services.broadcasts_for_faculty(faculty, academic_year=academic_year)
        return 200, BroadcastListResponseSchema(
            success=True,
            data=[broadcast_to_schema(b) for b in broadcasts],
            count=len(broadcasts),
        )
