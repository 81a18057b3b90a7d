"""
Project services: listing and grouping for the admin screens, team
creation, guide reassignment and status changes.
"""

import logging
from typing import Any

from django.db import transaction
from django_fsm import can_proceed

from capstone_backend.academics.models import DepartmentConfig
from capstone_backend.core.exceptions import BadRequestError
from capstone_backend.core.exceptions import ConflictError
from capstone_backend.core.exceptions import NotFoundError
from capstone_backend.core.exceptions import ValidationError
from capstone_backend.faculty.models import Faculty
from capstone_backend.projects.models import Project
from capstone_backend.projects.models import ProjectStatus
from capstone_backend.students.models import Student

logger = logging.getLogger(__name__)


def _with_relations(queryset):
    return queryset.select_related("guide_faculty", "panel").prefetch_related(
        "students",
        "panel__memberships__faculty",
    )


def get_project(project_id) -> Project:
    project = _with_relations(Project.objects.filter(id=project_id)).first()
    if project is None:
        raise NotFoundError("Project not found.")
    return project


def list_projects(
    academic_year: str | None = None,
    school: str | None = None,
    department: str | None = None,
    status: str | None = None,
    guide_employee_id: str | None = None,
    panel_id=None,
    specialization: str | None = None,
    panel_member: str | None = None,
) -> list[Project]:
    queryset = Project.objects.all()
    if academic_year:
        queryset = queryset.filter(academic_year=academic_year)
    if school:
        queryset = queryset.filter(school=school)
    if department:
        queryset = queryset.filter(department=department)
    if status:
        queryset = queryset.filter(status=status)
    if guide_employee_id:
        queryset = queryset.filter(guide_faculty__employee_id=guide_employee_id)
    if panel_id:
        queryset = queryset.filter(panel_id=panel_id)
    if specialization:
        queryset = queryset.filter(specialization=specialization)
    if panel_member:
        queryset = queryset.filter(panel__memberships__faculty__employee_id=panel_member)
    return list(_with_relations(queryset).order_by("name"))


def projects_by_guide(**filters) -> list[tuple[Faculty, list[Project]]]:
    """Projects grouped under their guide, guides in first-seen order."""
    grouped: dict[Any, tuple[Faculty, list[Project]]] = {}
    for project in list_projects(**filters):
        guide = project.guide_faculty
        grouped.setdefault(guide.id, (guide, []))[1].append(project)
    return list(grouped.values())


def projects_by_panel(**filters) -> list[tuple[Any, list[Project]]]:
    """Projects grouped under their panel; projects without a panel are left out."""
    grouped: dict[Any, tuple[Any, list[Project]]] = {}
    for project in list_projects(**filters):
        if project.panel is None:
            continue
        grouped.setdefault(project.panel_id, (project.panel, []))[1].append(project)
    return list(grouped.values())


def create_project(data: dict[str, Any], created_by=None) -> Project:
    """
    Create a team project.

    Students are given by registration number and must belong to the
    project's academic year; a student can be on one active project at a
    time. Team size is checked against the scope's DepartmentConfig.
    """
    academic_year = data["academic_year"]
    school = data["school"]
    department = data["department"]
    reg_nos = data["student_reg_nos"]

    if len(set(reg_nos)) != len(reg_nos):
        raise ValidationError("Duplicate students in team.")

    bounds = DepartmentConfig.team_bounds(academic_year, school, department)
    if bounds and not bounds[0] <= len(reg_nos) <= bounds[1]:
        raise ValidationError(f"Team size must be between {bounds[0]} and {bounds[1]}.")

    guide = Faculty.objects.filter(employee_id=data["guide_employee_id"], is_active=True).first()
    if guide is None:
        raise NotFoundError("Guide faculty not found.")

    students = {
        s.reg_no: s
        for s in Student.objects.filter(reg_no__in=reg_nos, academic_year=academic_year, is_active=True)
    }
    missing = [reg_no for reg_no in reg_nos if reg_no not in students]
    if missing:
        raise ValidationError(f"Students not found: {', '.join(missing)}", details={"missing": missing})

    taken = sorted(
        Student.objects.filter(
            pk__in=[s.pk for s in students.values()],
            projects__status=ProjectStatus.ACTIVE,
        )
        .values_list("reg_no", flat=True)
        .distinct()
    )
    if taken:
        raise ConflictError(
            f"Students already in an active project: {', '.join(taken)}",
            details={"students": taken},
        )

    with transaction.atomic():
        project = Project.objects.create(
            name=data["name"],
            academic_year=academic_year,
            school=school,
            department=department,
            guide_faculty=guide,
            specialization=data.get("specialization") or "",
            project_type=data.get("project_type") or "",
        )
        project.students.set(students[reg_no] for reg_no in reg_nos)

    logger.info(
        "EVENT: project_created project=%s guide=%s students=%d by=%s",
        project.id,
        guide.employee_id,
        len(reg_nos),
        created_by,
    )
    return project


def reassign_guide(project_id, guide_employee_id: str, reassigned_by=None) -> Project:
    project = get_project(project_id)
    if project.status != ProjectStatus.ACTIVE:
        raise BadRequestError("Only active projects can change guide.")

    guide = Faculty.objects.filter(employee_id=guide_employee_id, is_active=True).first()
    if guide is None:
        raise NotFoundError("Guide faculty not found.")
    if guide.pk == project.guide_faculty_id:
        raise BadRequestError("Faculty is already the guide of this project.")
    if not guide.belongs_to(project.school, project.department):
        raise BadRequestError("Guide must belong to the project's school and department.")

    previous = project.guide_faculty.employee_id
    project.guide_faculty = guide
    project.save(update_fields=["guide_faculty", "modified"])

    logger.info(
        "EVENT: project_guide_reassigned project=%s from=%s to=%s by=%s",
        project.id,
        previous,
        guide_employee_id,
        reassigned_by,
    )
    return project


def toggle_best_project(project_id, updated_by=None) -> Project:
    project = get_project(project_id)
    project.best_project = not project.best_project
    project.save(update_fields=["best_project", "modified"])

    logger.info(
        "EVENT: project_marked_best project=%s best=%s by=%s",
        project.id,
        project.best_project,
        updated_by,
    )
    return project


def complete_project(project_id, completed_by=None) -> Project:
    project = get_project(project_id)
    if not can_proceed(project.complete):
        raise BadRequestError("Project is already completed.")
    project.complete()
    project.save()

    logger.info("EVENT: project_completed project=%s by=%s", project.id, completed_by)
    return project
