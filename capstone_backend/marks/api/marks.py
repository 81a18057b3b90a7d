"""
Marking schema and mark entry API controllers.
"""

from uuid import UUID

from django.http import HttpRequest
from ninja_extra import api_controller
from ninja_extra import http_get
from ninja_extra import http_post
from ninja_extra import http_put

from capstone_backend.coordinators.services import require_capability
from capstone_backend.core.api import BaseAPI
from capstone_backend.core.api import IsAdminOrCoordinator
from capstone_backend.core.api import IsAuthenticated
from capstone_backend.core.api import IsFaculty
from capstone_backend.core.exceptions import APIException
from capstone_backend.core.exceptions import ErrorSchema
from capstone_backend.core.exceptions import NotFoundError
from capstone_backend.faculty.services import get_faculty_for_user
from capstone_backend.marks import services
from capstone_backend.marks.models import MarkingSchema
from capstone_backend.marks.models import Marks
from capstone_backend.marks.schemas import MarkingSchemaCreateSchema
from capstone_backend.marks.schemas import MarkingSchemaResponseSchema
from capstone_backend.marks.schemas import MarkingSchemaSchema
from capstone_backend.marks.schemas import MarkingSchemaUpdateSchema
from capstone_backend.marks.schemas import MarksListResponseSchema
from capstone_backend.marks.schemas import MarksSchema
from capstone_backend.marks.schemas import TeamMarksResponseSchema
from capstone_backend.marks.schemas import TeamMarksSchema
from capstone_backend.marks.schemas import TeamMarksSubmitSchema


def marking_schema_to_schema(schema: MarkingSchema) -> MarkingSchemaSchema:
    return MarkingSchemaSchema(
        id=schema.id,
        academic_year=schema.academic_year,
        school=schema.school,
        department=schema.department,
        reviews=schema.reviews,
        modified=schema.modified,
    )


def marks_to_schema(marks: Marks) -> MarksSchema:
    return MarksSchema(
        id=marks.id,
        student_reg_no=marks.student.reg_no,
        student_name=marks.student.name,
        project_id=marks.project_id,
        review_name=marks.review_name,
        faculty_type=marks.faculty_type,
        component_marks=marks.component_marks,
        total_marks=marks.total_marks,
        max_total_marks=marks.max_total_marks,
        attendance=marks.attendance,
        pat=marks.pat,
        is_submitted=marks.is_submitted,
        modified=marks.modified,
    )


@api_controller("/admin/marking-schema", tags=["Marking schema"], permissions=[IsAdminOrCoordinator])
class MarkingSchemaController(BaseAPI):
    """Review rubrics per academic year, school and department."""

    @http_get(
        "",
        response={200: MarkingSchemaResponseSchema, 404: ErrorSchema},
        permissions=[IsAuthenticated],
        url_name="marking_schema_get",
    )
    def get_schema(self, request: HttpRequest, academic_year: str, school: str, department: str):
        try:
            schema = services.get_marking_schema(academic_year, school, department)
        except APIException as exc:
            return exc.to_response()
        return 200, MarkingSchemaResponseSchema(success=True, data=marking_schema_to_schema(schema))

    @http_post(
        "",
        response={200: MarkingSchemaResponseSchema, 201: MarkingSchemaResponseSchema, 400: ErrorSchema, 403: ErrorSchema},
        url_name="marking_schema_save",
    )
    def save_schema(self, request: HttpRequest, data: MarkingSchemaCreateSchema):
        """Create the scope's marking schema, or replace its reviews."""
        try:
            require_capability(request.user, "canEditMarkingSchema", data.academic_year, data.school, data.department)
            schema, created = services.upsert_marking_schema(
                data.academic_year,
                data.school,
                data.department,
                [review.model_dump(mode="json") for review in data.reviews],
                updated_by=request.user,
            )
        except APIException as exc:
            return exc.to_response()
        if created:
            return 201, MarkingSchemaResponseSchema(
                success=True,
                message="Marking schema created successfully.",
                data=marking_schema_to_schema(schema),
            )
        return 200, MarkingSchemaResponseSchema(
            success=True,
            message="Marking schema updated successfully.",
            data=marking_schema_to_schema(schema),
        )

    @http_put(
        "/{schema_id}",
        response={200: MarkingSchemaResponseSchema, 400: ErrorSchema, 403: ErrorSchema, 404: ErrorSchema},
        url_name="marking_schema_update",
    )
    def update_schema(self, request: HttpRequest, schema_id: UUID, data: MarkingSchemaUpdateSchema):
        try:
            schema = MarkingSchema.objects.filter(id=schema_id).first()
            if schema is None:
                raise NotFoundError("Marking schema not found.")
            require_capability(
                request.user,
                "canEditMarkingSchema",
                schema.academic_year,
                schema.school,
                schema.department,
            )
            schema = services.update_marking_schema(
                schema_id,
                [review.model_dump(mode="json") for review in data.reviews],
                updated_by=request.user,
            )
        except APIException as exc:
            return exc.to_response()
        return 200, MarkingSchemaResponseSchema(
            success=True,
            message="Marking schema updated successfully.",
            data=marking_schema_to_schema(schema),
        )


@api_controller("/faculty/marks", tags=["Marks"], permissions=[IsFaculty])
class FacultyMarksController(BaseAPI):
    """Team mark submission by guides and panel members."""

    @http_post(
        "",
        response={200: TeamMarksResponseSchema, 400: ErrorSchema, 403: ErrorSchema, 404: ErrorSchema},
        url_name="marks_submit",
    )
    def submit_marks(self, request: HttpRequest, data: TeamMarksSubmitSchema):
        """Save the marks of every student in a team for one review."""
        try:
            faculty = get_faculty_for_user(request.user)
            saved, feedback = services.submit_team_marks(
                faculty,
                data.project_id,
                data.review_name,
                marks=data.marks,
                meta={reg_no: m.model_dump() for reg_no, m in data.meta.items()},
                team_comment=data.team_comment,
                ppt_approved=data.ppt_approved,
            )
        except APIException as exc:
            return exc.to_response()
        return 200, TeamMarksResponseSchema(
            success=True,
            message="Marks saved successfully.",
            data=TeamMarksSchema(
                project_id=data.project_id,
                review_name=data.review_name,
                team_comment=feedback.team_comment,
                ppt_approved=feedback.ppt_approved,
                marks=[marks_to_schema(m) for m in saved],
            ),
        )

    @http_get("", response={200: MarksListResponseSchema, 404: ErrorSchema}, url_name="marks_list")
    def list_marks(
        self,
        request: HttpRequest,
        project_id: UUID | None = None,
        review_name: str | None = None,
    ):
        """Marks the current faculty member has given."""
        try:
            faculty = get_faculty_for_user(request.user)
        except APIException as exc:
            return exc.to_response()
        marks = list(services.list_marks(faculty=faculty, project_id=project_id, review_name=review_name))
        return 200, MarksListResponseSchema(
            success=True,
            data=[marks_to_schema(m) for m in marks],
            count=len(marks),
        )
