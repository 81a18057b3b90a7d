"""
Marking schema and mark submission services.
"""

import logging
from decimal import ROUND_HALF_UP
from decimal import Decimal
from typing import Any

from django.conf import settings
from django.db import transaction
from django.utils import timezone
from django.utils.dateparse import parse_datetime

from capstone_backend.core.exceptions import BadRequestError
from capstone_backend.core.exceptions import NotFoundError
from capstone_backend.core.exceptions import PermissionDeniedError
from capstone_backend.core.exceptions import ValidationError
from capstone_backend.faculty.models import Faculty
from capstone_backend.faculty_requests.models import FacultyRequest
from capstone_backend.faculty_requests.models import RequestStatus
from capstone_backend.marks.models import Attendance
from capstone_backend.marks.models import FacultyType
from capstone_backend.marks.models import Marks
from capstone_backend.marks.models import MarkingSchema
from capstone_backend.marks.models import ReviewFeedback
from capstone_backend.marks.workflow import is_team_comment_valid
from capstone_backend.panels.models import PanelMember
from capstone_backend.projects.models import Project
from capstone_backend.projects.models import ProjectStatus

logger = logging.getLogger(__name__)

TWO_PLACES = Decimal("0.01")


def validate_reviews(reviews: list[dict[str, Any]]) -> None:
    """Check review names and rubric components of a marking schema."""
    review_names: set[str] = set()
    for review in reviews:
        name = review.get("review_name")
        if not name:
            raise ValidationError("Each review needs a review name.")
        if name in review_names:
            raise ValidationError(f"Duplicate review '{name}'.")
        review_names.add(name)
        if review.get("faculty_type") not in FacultyType.values:
            raise ValidationError(f"Review '{name}' must be marked by 'guide' or 'panel'.")

        component_ids: set[str] = set()
        for component in review.get("components", []):
            component_id = component.get("component_id")
            if not component_id:
                raise ValidationError(f"Each component of review '{name}' needs a component id.")
            if component_id in component_ids:
                raise ValidationError(f"Duplicate component '{component_id}' in review '{name}'.")
            component_ids.add(component_id)
            if not component.get("max_marks") or component["max_marks"] <= 0:
                raise ValidationError(f"Component '{component_id}' must have max marks greater than 0.")
            if not component.get("levels"):
                raise ValidationError(f"Component '{component_id}' must have at least one level.")


def get_marking_schema(academic_year: str, school: str, department: str) -> MarkingSchema:
    schema = MarkingSchema.objects.filter(
        academic_year=academic_year,
        school=school,
        department=department,
    ).first()
    if schema is None:
        raise NotFoundError("Marking schema not found.")
    return schema


def upsert_marking_schema(
    academic_year: str,
    school: str,
    department: str,
    reviews: list[dict[str, Any]],
    updated_by=None,
) -> tuple[MarkingSchema, bool]:
    validate_reviews(reviews)
    schema, created = MarkingSchema.objects.update_or_create(
        academic_year=academic_year,
        school=school,
        department=department,
        defaults={"reviews": reviews},
    )
    logger.info(
        "EVENT: marking_schema_saved schema=%s scope=%s/%s/%s created=%s by=%s",
        schema.id,
        academic_year,
        school,
        department,
        created,
        updated_by,
    )
    return schema, created


def update_marking_schema(schema_id, reviews: list[dict[str, Any]], updated_by=None) -> MarkingSchema:
    schema = MarkingSchema.objects.filter(id=schema_id).first()
    if schema is None:
        raise NotFoundError("Marking schema not found.")
    validate_reviews(reviews)
    schema.reviews = reviews
    schema.save(update_fields=["reviews", "modified"])

    logger.info("EVENT: marking_schema_updated schema=%s by=%s", schema.id, updated_by)
    return schema


def _parse_deadline(value):
    if not value:
        return None
    deadline = parse_datetime(value) if isinstance(value, str) else value
    if deadline is not None and timezone.is_naive(deadline):
        deadline = timezone.make_aware(deadline)
    return deadline


def _check_deadline(review: dict[str, Any], faculty: Faculty, project: Project) -> None:
    """
    Past the review deadline, only an approved request reopens mark entry.

    The request's new deadline, when given, bounds the reopened window.
    """
    deadline = _parse_deadline(review.get("deadline"))
    now = timezone.now()
    if deadline is None or now <= deadline:
        return

    extension = (
        FacultyRequest.objects.filter(
            faculty=faculty,
            project=project,
            review_name=review["review_name"],
            status=RequestStatus.APPROVED,
        )
        .order_by("-resolved_at")
        .first()
    )
    if extension is not None and (extension.new_deadline is None or now <= extension.new_deadline):
        return
    raise PermissionDeniedError(
        "Review deadline has passed. Submit a request to reopen mark entry.",
        code="DEADLINE_PASSED",
    )


def _check_marker(review: dict[str, Any], faculty: Faculty, project: Project) -> None:
    if review["faculty_type"] == FacultyType.GUIDE:
        if project.guide_faculty_id != faculty.pk:
            raise PermissionDeniedError("Only the project guide can submit marks for this review.")
        return
    if project.panel_id is None or not PanelMember.objects.filter(panel_id=project.panel_id, faculty=faculty).exists():
        raise PermissionDeniedError("Only members of the project's panel can submit marks for this review.")


def _score_student(components: list[dict[str, Any]], scores: dict[str, float], reg_no: str) -> Decimal:
    """Total of one student's scores, each scaled from its level range to max marks."""
    by_id = {c["component_id"]: c for c in components}
    unknown = sorted(set(scores) - set(by_id))
    if unknown:
        raise ValidationError(
            f"Unknown criteria for student {reg_no}: {', '.join(unknown)}",
            details={"student": reg_no, "unknown": unknown},
        )
    missing = [cid for cid in by_id if cid not in scores]
    if missing:
        raise ValidationError(
            f"Marks incomplete for student {reg_no}.",
            details={"student": reg_no, "missing": missing},
        )

    total = Decimal(0)
    for component_id, score in scores.items():
        component = by_id[component_id]
        levels = [level["score"] for level in component["levels"]]
        if score not in levels:
            raise ValidationError(
                f"Score {score} is not a level of '{component_id}'.",
                details={"student": reg_no, "component": component_id},
            )
        max_level = max(levels)
        if max_level:
            total += Decimal(str(score)) / Decimal(str(max_level)) * Decimal(str(component["max_marks"]))
    return total.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def submit_team_marks(
    faculty: Faculty,
    project_id,
    review_name: str,
    marks: dict[str, dict[str, float]],
    meta: dict[str, dict[str, Any]],
    team_comment: str,
    ppt_approved: bool = False,
) -> tuple[list[Marks], ReviewFeedback]:
    """
    Save one faculty member's marks for a whole team in one review.

    ``marks`` and ``meta`` are keyed by student registration number. Absent
    students are saved with zero marks; PAT students are saved without
    criterion marks. Existing rows for the same student, faculty and review
    are replaced.
    """
    min_length = settings.MARK_ENTRY_MIN_COMMENT_LENGTH
    if not is_team_comment_valid(team_comment, min_length):
        raise ValidationError(f"Team comments are required (min {min_length} chars).")

    project = Project.objects.select_related("guide_faculty").filter(id=project_id).first()
    if project is None:
        raise NotFoundError("Project not found.")
    if project.status != ProjectStatus.ACTIVE:
        raise BadRequestError("Marks cannot be changed on a completed project.")

    schema = get_marking_schema(project.academic_year, project.school, project.department)
    review = schema.get_review(review_name)
    if review is None:
        raise NotFoundError(f"Review '{review_name}' not found in the marking schema.")

    _check_marker(review, faculty, project)
    _check_deadline(review, faculty, project)

    students = {s.reg_no: s for s in project.students.all()}
    submitted = set(marks) | set(meta)
    outsiders = sorted(submitted - set(students))
    if outsiders:
        raise ValidationError(
            f"Students not in this project: {', '.join(outsiders)}",
            details={"students": outsiders},
        )
    missing = sorted(set(students) - submitted)
    if missing:
        raise ValidationError(
            f"Marks missing for students: {', '.join(missing)}",
            details={"students": missing},
        )

    components = review.get("components", [])
    max_total = sum((Decimal(str(c["max_marks"])) for c in components), Decimal(0))
    rows = []
    for reg_no, student in students.items():
        student_meta = meta.get(reg_no, {})
        absent = student_meta.get("attendance") == Attendance.ABSENT
        pat = bool(student_meta.get("pat")) and not absent
        if absent or pat:
            component_marks, total = {}, Decimal(0)
        else:
            component_marks = marks.get(reg_no, {})
            total = _score_student(components, component_marks, reg_no)
        rows.append(
            (
                student,
                {
                    "project": project,
                    "faculty_type": review["faculty_type"],
                    "component_marks": component_marks,
                    "total_marks": total,
                    "max_total_marks": max_total,
                    "attendance": Attendance.ABSENT if absent else Attendance.PRESENT,
                    "pat": pat,
                    "is_submitted": True,
                },
            )
        )

    with transaction.atomic():
        saved = [
            Marks.objects.update_or_create(
                student=student,
                faculty=faculty,
                review_name=review_name,
                defaults=defaults,
            )[0]
            for student, defaults in rows
        ]
        feedback, _ = ReviewFeedback.objects.update_or_create(
            project=project,
            faculty=faculty,
            review_name=review_name,
            defaults={"team_comment": team_comment.strip(), "ppt_approved": ppt_approved},
        )

    logger.info(
        "EVENT: team_marks_submitted project=%s review=%s faculty=%s students=%d",
        project.id,
        review_name,
        faculty.employee_id,
        len(saved),
    )
    return saved, feedback


def list_marks(faculty: Faculty | None = None, project_id=None, review_name: str | None = None):
    queryset = Marks.objects.select_related("student", "project", "faculty")
    if faculty is not None:
        queryset = queryset.filter(faculty=faculty)
    if project_id:
        queryset = queryset.filter(project_id=project_id)
    if review_name:
        queryset = queryset.filter(review_name=review_name)
    return queryset
