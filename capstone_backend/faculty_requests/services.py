"""
Faculty request services: submission by faculty, review by admins.
"""

import logging
from typing import Any

from django_fsm import can_proceed

from capstone_backend.core.exceptions import ConflictError
from capstone_backend.core.exceptions import NotFoundError
from capstone_backend.core.exceptions import PermissionDeniedError
from capstone_backend.core.exceptions import ValidationError
from capstone_backend.faculty.models import Faculty
from capstone_backend.faculty_requests.models import FacultyRequest
from capstone_backend.faculty_requests.models import RequestCategory
from capstone_backend.faculty_requests.models import RequestStatus
from capstone_backend.panels.models import PanelMember
from capstone_backend.projects.models import Project

logger = logging.getLogger(__name__)


def _with_relations(queryset):
    return queryset.select_related("faculty", "project", "student", "resolved_by")


def get_request(request_id) -> FacultyRequest:
    faculty_request = _with_relations(FacultyRequest.objects.filter(id=request_id)).first()
    if faculty_request is None:
        raise NotFoundError("Request not found.")
    return faculty_request


def create_request(faculty: Faculty, data: dict[str, Any]) -> FacultyRequest:
    """
    File a request about one of the faculty member's projects.

    A ``guide`` request needs the faculty member to guide the project, a
    ``panel`` request needs them on the project's panel. Only one pending
    request per project and review is kept open.
    """
    project = Project.objects.filter(id=data["project_id"]).first()
    if project is None:
        raise NotFoundError("Project not found.")

    category = data["category"]
    if category == RequestCategory.GUIDE and project.guide_faculty_id != faculty.pk:
        raise PermissionDeniedError("You are not the guide of this project.")
    if category == RequestCategory.PANEL and not PanelMember.objects.filter(
        panel_id=project.panel_id,
        faculty=faculty,
    ).exists():
        raise PermissionDeniedError("You are not on this project's panel.")

    student = None
    if data.get("student_reg_no"):
        student = project.students.filter(reg_no=data["student_reg_no"]).first()
        if student is None:
            raise ValidationError("Student is not part of this project.")

    if FacultyRequest.objects.filter(
        faculty=faculty,
        project=project,
        review_name=data["review_name"],
        status=RequestStatus.PENDING,
    ).exists():
        raise ConflictError("A pending request already exists for this review.")

    faculty_request = FacultyRequest.objects.create(
        faculty=faculty,
        project=project,
        student=student,
        category=category,
        review_name=data["review_name"],
        message=data["message"],
    )
    logger.info(
        "EVENT: request_created request=%s faculty=%s project=%s review=%s",
        faculty_request.id,
        faculty.employee_id,
        project.id,
        faculty_request.review_name,
    )
    return faculty_request


def list_requests(
    school: str | None = None,
    department: str | None = None,
    academic_year: str | None = None,
    category: str | None = None,
    status: str | None = None,
    faculty: Faculty | None = None,
):
    queryset = FacultyRequest.objects.all()
    if school:
        queryset = queryset.filter(project__school=school)
    if department:
        queryset = queryset.filter(project__department=department)
    if academic_year:
        queryset = queryset.filter(project__academic_year=academic_year)
    if category:
        queryset = queryset.filter(category=category)
    if status:
        queryset = queryset.filter(status=status)
    if faculty is not None:
        queryset = queryset.filter(faculty=faculty)
    return _with_relations(queryset)


def requests_by_faculty(**filters) -> list[tuple[Faculty, list[FacultyRequest]]]:
    """Requests grouped under the faculty member who filed them."""
    grouped: dict[Any, tuple[Faculty, list[FacultyRequest]]] = {}
    for faculty_request in list_requests(**filters):
        faculty = faculty_request.faculty
        grouped.setdefault(faculty.pk, (faculty, []))[1].append(faculty_request)
    return list(grouped.values())


def update_request_status(
    request_id,
    status: str,
    resolved_by,
    remarks: str = "",
    new_deadline=None,
) -> FacultyRequest:
    """Approve or reject a pending request; resolved requests are final."""
    faculty_request = get_request(request_id)

    if status == RequestStatus.APPROVED:
        transition = faculty_request.approve
        kwargs = {"remarks": remarks, "new_deadline": new_deadline}
    elif status == RequestStatus.REJECTED:
        transition = faculty_request.reject
        kwargs = {"remarks": remarks}
    else:
        raise ValidationError("Status must be 'approved' or 'rejected'.")

    if not can_proceed(transition):
        raise ConflictError(f"Request has already been {faculty_request.status}.")
    transition(resolved_by, **kwargs)
    faculty_request.save()

    logger.info(
        "EVENT: request_status_updated request=%s status=%s by=%s",
        faculty_request.id,
        faculty_request.status,
        resolved_by,
    )
    return faculty_request
