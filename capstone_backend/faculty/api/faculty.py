"""
Faculty administration API controller.
"""

from django.http import HttpRequest
from ninja_extra import api_controller
from ninja_extra import http_delete
from ninja_extra import http_get
from ninja_extra import http_post
from ninja_extra import http_put

from capstone_backend.core.api import BaseAPI
from capstone_backend.core.api import IsAdmin
from capstone_backend.core.api import IsAdminOrCoordinator
from capstone_backend.core.exceptions import APIException
from capstone_backend.core.exceptions import ErrorSchema
from capstone_backend.core.exceptions import PermissionDeniedError
from capstone_backend.core.roles import is_admin
from capstone_backend.core.schemas import BatchResponseSchema
from capstone_backend.core.schemas import BatchResultSchema
from capstone_backend.core.schemas import SuccessSchema
from capstone_backend.faculty import services
from capstone_backend.faculty.models import Faculty
from capstone_backend.faculty.models import FacultyRole
from capstone_backend.faculty.schemas import FacultyBulkSchema
from capstone_backend.faculty.schemas import FacultyCreateSchema
from capstone_backend.faculty.schemas import FacultyListResponseSchema
from capstone_backend.faculty.schemas import FacultyResponseSchema
from capstone_backend.faculty.schemas import FacultySchema
from capstone_backend.faculty.schemas import FacultyUpdateSchema


def _check_grants_admin(user, role: str | None) -> None:
    if role == FacultyRole.ADMIN and not is_admin(user):
        raise PermissionDeniedError("Only admins can grant the admin role.")


def faculty_to_schema(faculty: Faculty) -> FacultySchema:
    return FacultySchema(
        id=faculty.id,
        employee_id=faculty.employee_id,
        name=faculty.name,
        email_id=faculty.email_id,
        phone_number=faculty.phone_number,
        role=faculty.role,
        schools=faculty.schools,
        departments=faculty.departments,
        specializations=faculty.specializations,
        is_active=faculty.is_active,
        created=faculty.created,
    )


@api_controller("/admin/faculty", tags=["Faculty"], permissions=[IsAdminOrCoordinator])
class FacultyAdminController(BaseAPI):
    """Create, list, update and delete faculty members."""

    @http_get(
        "",
        response={200: FacultyListResponseSchema, 400: ErrorSchema},
        url_name="faculty_list",
    )
    def list_faculty(
        self,
        request: HttpRequest,
        school: str | None = None,
        department: str | None = None,
        role: str | None = None,
        specialization: str | None = None,
        search: str | None = None,
        sort_by: str = "name",
        sort_order: str = "asc",
    ):
        """List faculty with optional filters and sorting."""
        try:
            faculty = services.list_faculty(
                school=school,
                department=department,
                role=role,
                specialization=specialization,
                search=search,
                sort_by=sort_by,
                sort_order=sort_order,
            )
        except APIException as exc:
            return exc.to_response()
        return 200, FacultyListResponseSchema(
            success=True,
            data=[faculty_to_schema(f) for f in faculty],
            count=len(faculty),
        )

    @http_post(
        "",
        response={201: FacultyResponseSchema, 400: ErrorSchema, 403: ErrorSchema, 409: ErrorSchema},
        url_name="faculty_create",
    )
    def create_faculty(self, request: HttpRequest, data: FacultyCreateSchema):
        try:
            _check_grants_admin(request.user, data.role)
            faculty = services.create_faculty(data.model_dump(), created_by=request.user)
        except APIException as exc:
            return exc.to_response()
        return 201, FacultyResponseSchema(
            success=True,
            message="Faculty created successfully.",
            data=faculty_to_schema(faculty),
        )

    @http_post(
        "/bulk",
        response={200: BatchResponseSchema, 403: ErrorSchema},
        url_name="faculty_bulk_create",
    )
    def bulk_create_faculty(self, request: HttpRequest, data: FacultyBulkSchema):
        """Create many faculty members; failing rows are reported individually."""
        try:
            for row in data.faculty:
                _check_grants_admin(request.user, row.role)
        except APIException as exc:
            return exc.to_response()
        result = services.bulk_create_faculty(
            [row.model_dump() for row in data.faculty],
            created_by=request.user,
        )
        return 200, BatchResponseSchema(
            success=True,
            message=f"Bulk creation complete: {result.created} created, {result.errors} errors.",
            data=BatchResultSchema(**result.to_dict()),
        )

    @http_post(
        "/admins",
        response={201: FacultyResponseSchema, 400: ErrorSchema, 409: ErrorSchema},
        permissions=[IsAdmin],
        url_name="faculty_create_admin",
    )
    def create_admin(self, request: HttpRequest, data: FacultyCreateSchema):
        try:
            faculty = services.create_admin(data.model_dump(), created_by=request.user)
        except APIException as exc:
            return exc.to_response()
        return 201, FacultyResponseSchema(
            success=True,
            message="Admin created successfully.",
            data=faculty_to_schema(faculty),
        )

    @http_put(
        "/{employee_id}",
        response={200: FacultyResponseSchema, 403: ErrorSchema, 404: ErrorSchema, 409: ErrorSchema},
        url_name="faculty_update",
    )
    def update_faculty(self, request: HttpRequest, employee_id: str, data: FacultyUpdateSchema):
        try:
            _check_grants_admin(request.user, data.role)
            faculty = services.update_faculty(
                employee_id,
                data.model_dump(exclude_unset=True),
                updated_by=request.user,
            )
        except APIException as exc:
            return exc.to_response()
        return 200, FacultyResponseSchema(
            success=True,
            message="Faculty updated successfully.",
            data=faculty_to_schema(faculty),
        )

    @http_delete(
        "/{employee_id}",
        response={200: SuccessSchema, 400: ErrorSchema, 404: ErrorSchema},
        permissions=[IsAdmin],
        url_name="faculty_delete",
    )
    def delete_faculty(self, request: HttpRequest, employee_id: str):
        try:
            services.delete_faculty(employee_id, deleted_by=request.user)
        except APIException as exc:
            return exc.to_response()
        return 200, SuccessSchema(message="Faculty deleted successfully.")
