"""
Faculty request API controllers.
"""

from uuid import UUID

from django.http import HttpRequest
from ninja_extra import api_controller
from ninja_extra import http_get
from ninja_extra import http_post
from ninja_extra import http_put

from capstone_backend.core.api import BaseAPI
from capstone_backend.core.api import IsAdmin
from capstone_backend.core.api import IsFaculty
from capstone_backend.core.exceptions import APIException
from capstone_backend.core.exceptions import ErrorSchema
from capstone_backend.faculty.schemas import FacultySummarySchema
from capstone_backend.faculty.services import get_faculty_for_user
from capstone_backend.faculty_requests import services
from capstone_backend.faculty_requests.models import FacultyRequest
from capstone_backend.faculty_requests.schemas import FacultyRequestCreateSchema
from capstone_backend.faculty_requests.schemas import FacultyRequestGroupResponseSchema
from capstone_backend.faculty_requests.schemas import FacultyRequestGroupSchema
from capstone_backend.faculty_requests.schemas import FacultyRequestListResponseSchema
from capstone_backend.faculty_requests.schemas import FacultyRequestResponseSchema
from capstone_backend.faculty_requests.schemas import FacultyRequestSchema
from capstone_backend.faculty_requests.schemas import RequestStatusUpdateSchema


def request_to_schema(faculty_request: FacultyRequest) -> FacultyRequestSchema:
    project = faculty_request.project
    student = faculty_request.student
    return FacultyRequestSchema(
        id=faculty_request.id,
        faculty=FacultySummarySchema.from_faculty(faculty_request.faculty),
        project_id=project.id,
        project_name=project.name,
        school=project.school,
        department=project.department,
        academic_year=project.academic_year,
        student_reg_no=student.reg_no if student else None,
        student_name=student.name if student else None,
        category=faculty_request.category,
        review_name=faculty_request.review_name,
        message=faculty_request.message,
        status=faculty_request.status,
        remarks=faculty_request.remarks,
        new_deadline=faculty_request.new_deadline,
        resolved_at=faculty_request.resolved_at,
        created=faculty_request.created,
    )


@api_controller("/admin/requests", tags=["Requests"], permissions=[IsAdmin])
class RequestAdminController(BaseAPI):
    """Review of faculty requests."""

    @http_get("", response={200: FacultyRequestListResponseSchema}, url_name="requests_list")
    def list_requests(
        self,
        request: HttpRequest,
        school: str | None = None,
        department: str | None = None,
        academic_year: str | None = None,
        category: str | None = None,
        status: str | None = None,
    ):
        requests = list(
            services.list_requests(
                school=school,
                department=department,
                academic_year=academic_year,
                category=category,
                status=status,
            )
        )
        return 200, FacultyRequestListResponseSchema(
            success=True,
            data=[request_to_schema(r) for r in requests],
            count=len(requests),
        )

    @http_get("/by-faculty", response={200: FacultyRequestGroupResponseSchema}, url_name="requests_by_faculty")
    def list_by_faculty(
        self,
        request: HttpRequest,
        school: str | None = None,
        department: str | None = None,
        academic_year: str | None = None,
        category: str | None = None,
        status: str | None = None,
    ):
        groups = services.requests_by_faculty(
            school=school,
            department=department,
            academic_year=academic_year,
            category=category,
            status=status,
        )
        return 200, FacultyRequestGroupResponseSchema(
            success=True,
            data=[
                FacultyRequestGroupSchema(
                    faculty=FacultySummarySchema.from_faculty(faculty),
                    requests=[request_to_schema(r) for r in requests],
                )
                for faculty, requests in groups
            ],
        )

    @http_put(
        "/{request_id}/status",
        response={200: FacultyRequestResponseSchema, 400: ErrorSchema, 404: ErrorSchema, 409: ErrorSchema},
        url_name="requests_update_status",
    )
    def update_status(self, request: HttpRequest, request_id: UUID, data: RequestStatusUpdateSchema):
        """Approve or reject a pending request."""
        try:
            faculty_request = services.update_request_status(
                request_id,
                data.status,
                resolved_by=request.user,
                remarks=data.remarks,
                new_deadline=data.new_deadline,
            )
        except APIException as exc:
            return exc.to_response()
        return 200, FacultyRequestResponseSchema(
            success=True,
            message=f"Request {faculty_request.status} successfully.",
            data=request_to_schema(faculty_request),
        )


@api_controller("/faculty/requests", tags=["Requests"], permissions=[IsFaculty])
class FacultyRequestController(BaseAPI):
    """Requests filed by the current faculty member."""

    @http_post(
        "",
        response={201: FacultyRequestResponseSchema, 400: ErrorSchema, 403: ErrorSchema, 404: ErrorSchema, 409: ErrorSchema},
        url_name="requests_create",
    )
    def create_request(self, request: HttpRequest, data: FacultyRequestCreateSchema):
        try:
            faculty = get_faculty_for_user(request.user)
            faculty_request = services.create_request(faculty, data.model_dump())
        except APIException as exc:
            return exc.to_response()
        return 201, FacultyRequestResponseSchema(
            success=True,
            message="Request submitted successfully.",
            data=request_to_schema(faculty_request),
        )

    @http_get("", response={200: FacultyRequestListResponseSchema, 404: ErrorSchema}, url_name="requests_mine")
    def list_mine(self, request: HttpRequest, status: str | None = None):
        try:
            faculty = get_faculty_for_user(request.user)
        except APIException as exc:
            return exc.to_response()
        requests = list(services.list_requests(faculty=faculty, status=status))
        return 200, FacultyRequestListResponseSchema(
            success=True,
            data=[request_to_schema(r) for r in requests],
            count=len(requests),
        )
