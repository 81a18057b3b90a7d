"""
Review panel services: membership validation, creation, project
assignment, batch auto-creation and auto-assignment.

Assignment keeps ``Panel.assigned_projects_count`` equal to the number of
projects referencing the panel. The counter is only ever moved by a
conditional UPDATE, so two concurrent assignments cannot both take the
last slot of a panel.
"""

import logging
from collections import defaultdict
from typing import Any

from django.conf import settings
from django.db import transaction
from django.db.models import F

from capstone_backend.academics.models import DepartmentConfig
from capstone_backend.core.batch import BatchResult
from capstone_backend.core.exceptions import APIException
from capstone_backend.core.exceptions import BadRequestError
from capstone_backend.core.exceptions import CapacityError
from capstone_backend.core.exceptions import NotFoundError
from capstone_backend.core.exceptions import ValidationError
from capstone_backend.faculty.models import Faculty
from capstone_backend.faculty.models import FacultyRole
from capstone_backend.panels.models import MemberRole
from capstone_backend.panels.models import Panel
from capstone_backend.panels.models import PanelMember
from capstone_backend.panels.models import PanelType
from capstone_backend.projects.models import Project
from capstone_backend.projects.models import ProjectStatus

logger = logging.getLogger(__name__)

PANEL_FULL_MESSAGE = "Panel has reached maximum capacity."


def validate_panel_members(
    employee_ids: list[str],
    academic_year: str,
    school: str,
    department: str,
) -> list[Faculty]:
    """
    Resolve employee ids to faculty, in the order given.

    Raises:
        ValidationError: duplicate ids, unknown ids (all listed in one
            message), or a member count outside the scope's panel bounds.
    """
    if len(set(employee_ids)) != len(employee_ids):
        raise ValidationError("Duplicate faculty members in panel.")

    found = {f.employee_id: f for f in Faculty.objects.filter(employee_id__in=employee_ids)}
    missing = [employee_id for employee_id in employee_ids if employee_id not in found]
    if missing:
        raise ValidationError(
            f"Faculty not found: {', '.join(missing)}",
            details={"missing": missing},
        )

    min_size, max_size = DepartmentConfig.panel_bounds(academic_year, school, department)
    if not min_size <= len(employee_ids) <= max_size:
        raise ValidationError(f"Panel size must be between {min_size} and {max_size}.")

    return [found[employee_id] for employee_id in employee_ids]


def _default_max_projects(academic_year: str, school: str, department: str) -> int:
    config = DepartmentConfig.objects.filter(
        academic_year=academic_year,
        school=school,
        department=department,
    ).first()
    return config.max_panel_size * 2 if config else 10


def _next_panel_name(academic_year: str, school: str, department: str) -> str:
    existing = Panel.objects.filter(
        academic_year=academic_year,
        school=school,
        department=department,
    ).count()
    return f"{department}-Panel-{existing + 1}"


def _set_members(panel: Panel, faculty: list[Faculty]) -> None:
    """Replace the membership; the first faculty member chairs."""
    panel.memberships.all().delete()
    PanelMember.objects.bulk_create([
        PanelMember(
            panel=panel,
            faculty=member,
            role=MemberRole.CHAIR if position == 0 else MemberRole.MEMBER,
            position=position,
        )
        for position, member in enumerate(faculty)
    ])


def get_panel(panel_id) -> Panel:
    panel = Panel.objects.filter(id=panel_id).first()
    if panel is None:
        raise NotFoundError("Panel not found.")
    return panel


def create_panel(data: dict[str, Any], created_by=None) -> Panel:
    """
    Create a panel from ``member_employee_ids`` and a scope.

    ``max_projects`` defaults to twice the scope's maximum panel size, or
    10 when the scope has no configuration.
    """
    academic_year = data["academic_year"]
    school = data["school"]
    department = data["department"]

    faculty = validate_panel_members(data["member_employee_ids"], academic_year, school, department)

    max_projects = data.get("max_projects") or _default_max_projects(academic_year, school, department)
    with transaction.atomic():
        panel = Panel.objects.create(
            panel_name=data.get("panel_name") or _next_panel_name(academic_year, school, department),
            academic_year=academic_year,
            school=school,
            department=department,
            venue=data.get("venue") or "",
            specializations=list(data.get("specializations") or []),
            panel_type=data.get("panel_type") or PanelType.REGULAR,
            max_projects=max_projects,
            created_by=created_by,
        )
        _set_members(panel, faculty)

    logger.info(
        "EVENT: panel_created panel=%s members=%d scope=%s/%s/%s by=%s",
        panel.id,
        len(faculty),
        academic_year,
        school,
        department,
        created_by,
    )
    return panel


def get_panel_list(
    academic_year: str | None = None,
    school: str | None = None,
    department: str | None = None,
    specialization: str | None = None,
    include_inactive: bool = False,
) -> list[Panel]:
    queryset = Panel.objects.prefetch_related("memberships__faculty")
    if not include_inactive:
        queryset = queryset.filter(is_active=True)
    if academic_year:
        queryset = queryset.filter(academic_year=academic_year)
    if school:
        queryset = queryset.filter(school=school)
    if department:
        queryset = queryset.filter(department=department)

    panels = list(queryset)
    if specialization:
        panels = [p for p in panels if specialization in p.specializations]
    return panels


def assign_panel_to_project(panel_id, project_id, assigned_by=None) -> tuple[Panel, Project]:
    """
    Point a project at a panel and take one of the panel's slots.

    Moving a project from another panel releases that panel's slot.
    Assigning a panel the project already has changes nothing, unless the
    panel is full, which is reported like any other full panel.

    Raises:
        NotFoundError: unknown panel or project.
        BadRequestError: inactive panel.
        CapacityError: the panel is full; nothing is modified.
    """
    with transaction.atomic():
        panel = Panel.objects.select_for_update().filter(id=panel_id).first()
        if panel is None:
            raise NotFoundError("Panel not found.")
        project = Project.objects.select_for_update().filter(id=project_id).first()
        if project is None:
            raise NotFoundError("Project not found.")

        if not panel.is_active:
            raise BadRequestError("Panel is not active.")
        if not panel.has_capacity:
            raise CapacityError(PANEL_FULL_MESSAGE)
        if project.panel_id == panel.id:
            return panel, project

        claimed = Panel.objects.filter(
            id=panel.id,
            assigned_projects_count__lt=F("max_projects"),
        ).update(assigned_projects_count=F("assigned_projects_count") + 1)
        if not claimed:
            raise CapacityError(PANEL_FULL_MESSAGE)

        previous_panel_id = project.panel_id
        if previous_panel_id:
            Panel.objects.filter(
                id=previous_panel_id,
                assigned_projects_count__gt=0,
            ).update(assigned_projects_count=F("assigned_projects_count") - 1)

        project.panel = panel
        project.save(update_fields=["panel", "modified"])
        panel.refresh_from_db(fields=["assigned_projects_count"])

    logger.info(
        "EVENT: panel_assigned_to_project panel=%s project=%s previous=%s by=%s",
        panel.id,
        project.id,
        previous_panel_id,
        assigned_by,
    )
    return panel, project


def update_panel_members(panel_id, employee_ids: list[str], updated_by=None) -> Panel:
    """Revalidate and replace a panel's members, in input order."""
    panel = get_panel(panel_id)
    faculty = validate_panel_members(employee_ids, panel.academic_year, panel.school, panel.department)

    with transaction.atomic():
        _set_members(panel, faculty)
        panel.save(update_fields=["modified"])

    logger.info(
        "EVENT: panel_members_updated panel=%s members=%d by=%s",
        panel.id,
        len(faculty),
        updated_by,
    )
    return panel


def update_panel(panel_id, data: dict[str, Any], updated_by=None) -> Panel:
    """Update panel attributes; keys absent from ``data`` are left unchanged."""
    with transaction.atomic():
        panel = Panel.objects.select_for_update().filter(id=panel_id).first()
        if panel is None:
            raise NotFoundError("Panel not found.")

        for field_name in ("panel_name", "venue", "specializations", "panel_type", "is_active"):
            if data.get(field_name) is not None:
                setattr(panel, field_name, data[field_name])

        max_projects = data.get("max_projects")
        if max_projects is not None:
            if max_projects < panel.assigned_projects_count:
                raise ValidationError(
                    f"Max projects cannot be lower than the {panel.assigned_projects_count} "
                    "projects already assigned."
                )
            panel.max_projects = max_projects

        panel.save()

        if data.get("member_employee_ids") is not None:
            faculty = validate_panel_members(
                data["member_employee_ids"],
                panel.academic_year,
                panel.school,
                panel.department,
            )
            _set_members(panel, faculty)

    logger.info("EVENT: panel_updated panel=%s fields=%s by=%s", panel.id, sorted(data), updated_by)
    return panel


def auto_create_panels(
    departments: list[str],
    school: str,
    academic_year: str,
    panel_size: int | None = None,
    created_by=None,
) -> BatchResult:
    """
    Build panels from the faculty of each department, grouped by specialization.

    Each specialization group is cut into consecutive chunks of
    ``panel_size``; a trailing chunk smaller than that is not used. Faculty
    with several specializations appear in each of their groups, so one
    person can end up on more than one new panel.
    """
    panel_size = panel_size or settings.PANEL_AUTO_CREATE_SIZE
    result = BatchResult()

    for department in departments:
        try:
            candidates = [
                f for f in Faculty.objects.filter(
                    role=FacultyRole.FACULTY,
                    is_active=True,
                ).order_by("employee_id")
                if f.specializations and f.belongs_to(school, department)
            ]
            if len(candidates) < panel_size:
                result.add_error(
                    f"Not enough faculty. Need {panel_size}, found {len(candidates)}",
                    department=department,
                )
                continue

            by_specialization: dict[str, list[Faculty]] = defaultdict(list)
            for faculty in candidates:
                for specialization in faculty.specializations:
                    by_specialization[specialization].append(faculty)

            for specialization, group in by_specialization.items():
                for start in range(0, len(group) - panel_size + 1, panel_size):
                    members = group[start:start + panel_size]
                    create_panel(
                        {
                            "member_employee_ids": [f.employee_id for f in members],
                            "academic_year": academic_year,
                            "school": school,
                            "department": department,
                            "specializations": [specialization],
                        },
                        created_by=created_by,
                    )
                    result.created += 1
        except APIException as exc:
            result.add_error(exc.message, department=department)
        except Exception:
            logger.exception("Auto-create failed for department %s", department)
            result.add_error("Unexpected error while creating panels.", department=department)

    logger.info(
        "EVENT: panels_auto_created school=%s year=%s created=%d errors=%d by=%s",
        school,
        academic_year,
        result.created,
        result.errors,
        created_by,
    )
    return result


def find_available_panel(project: Project) -> Panel | None:
    """Least-loaded active panel of the project's scope covering its specialization."""
    panels = Panel.objects.filter(
        academic_year=project.academic_year,
        school=project.school,
        department=project.department,
        is_active=True,
        assigned_projects_count__lt=F("max_projects"),
    ).order_by("assigned_projects_count", "created")
    for panel in panels:
        if project.specialization in panel.specializations:
            return panel
    return None


def auto_assign_panels_to_projects(
    academic_year: str,
    school: str,
    department: str,
    assigned_by=None,
) -> BatchResult:
    """Give every active project without a panel the least-loaded eligible panel."""
    result = BatchResult()
    projects = Project.objects.filter(
        academic_year=academic_year,
        school=school,
        department=department,
        panel__isnull=True,
        status=ProjectStatus.ACTIVE,
    ).order_by("created")

    for project in projects:
        try:
            panel = find_available_panel(project)
            if panel is None:
                result.add_error("No available panel found", project_id=str(project.id))
                continue
            assign_panel_to_project(panel.id, project.id, assigned_by=assigned_by)
        except APIException as exc:
            result.add_error(exc.message, project_id=str(project.id))
            continue
        except Exception:
            logger.exception("Auto-assign failed for project %s", project.id)
            result.add_error("Unexpected error while assigning a panel.", project_id=str(project.id))
            continue
        result.assigned += 1

    logger.info(
        "EVENT: panels_auto_assigned scope=%s/%s/%s assigned=%d errors=%d by=%s",
        academic_year,
        school,
        department,
        result.assigned,
        result.errors,
        assigned_by,
    )
    return result


def delete_panel(panel_id, deleted_by=None) -> None:
    """Delete a panel no project references."""
    project_count = Project.objects.filter(panel_id=panel_id).count()
    if project_count > 0:
        raise BadRequestError(f"Cannot delete panel with {project_count} assigned projects.")

    deleted, _ = Panel.objects.filter(id=panel_id).delete()
    if not deleted:
        raise NotFoundError("Panel not found.")

    logger.info("EVENT: panel_deleted panel=%s by=%s", panel_id, deleted_by)
