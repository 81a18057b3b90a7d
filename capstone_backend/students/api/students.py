"""
Student roster API controller.
"""

from django.http import HttpRequest
from ninja_extra import api_controller
from ninja_extra import http_get
from ninja_extra import http_post

from capstone_backend.coordinators.services import require_capability
from capstone_backend.core.api import BaseAPI
from capstone_backend.core.api import IsAdminOrCoordinator
from capstone_backend.core.exceptions import APIException
from capstone_backend.core.exceptions import ErrorSchema
from capstone_backend.core.schemas import BatchResponseSchema
from capstone_backend.core.schemas import BatchResultSchema
from capstone_backend.students import services
from capstone_backend.students.models import Student
from capstone_backend.students.schemas import StudentListResponseSchema
from capstone_backend.students.schemas import StudentSchema
from capstone_backend.students.schemas import StudentUploadSchema


def student_to_schema(student: Student) -> StudentSchema:
    return StudentSchema(
        id=student.id,
        reg_no=student.reg_no,
        name=student.name,
        email_id=student.email_id,
        academic_year=student.academic_year,
        school=student.school,
        department=student.department,
        pat=student.pat,
        is_active=student.is_active,
    )


@api_controller("/admin/students", tags=["Students"], permissions=[IsAdminOrCoordinator])
class StudentAdminController(BaseAPI):
    """Student roster listing and upload."""

    @http_get("", response={200: StudentListResponseSchema}, url_name="students_list")
    def list_students(
        self,
        request: HttpRequest,
        academic_year: str | None = None,
        school: str | None = None,
        department: str | None = None,
        reg_no: str | None = None,
        is_active: bool | None = None,
    ):
        students = list(services.list_students(academic_year, school, department, reg_no, is_active))
        return 200, StudentListResponseSchema(
            success=True,
            data=[student_to_schema(s) for s in students],
            count=len(students),
        )

    @http_post(
        "/upload",
        response={200: BatchResponseSchema, 403: ErrorSchema},
        url_name="students_upload",
    )
    def upload_students(self, request: HttpRequest, data: StudentUploadSchema):
        """Create or update students from rows already parsed by the client."""
        try:
            require_capability(
                request.user,
                "canUploadStudents",
                data.academic_year,
                data.school,
                data.department,
            )
        except APIException as exc:
            return exc.to_response()

        result = services.upload_students(
            [row.model_dump() for row in data.students],
            data.academic_year,
            data.school,
            data.department,
            uploaded_by=request.user,
        )
        return 200, BatchResponseSchema(
            success=True,
            message=(
                f"Upload complete: {result.created} created, {result.updated} updated, "
                f"{result.errors} errors."
            ),
            data=BatchResultSchema(**result.to_dict()),
        )
