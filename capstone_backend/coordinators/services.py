"""
Project coordinator services.

A coordinator record grants one faculty member a set of capabilities in
one scope. Membership of the Project Coordinator group follows the
faculty member's active records: it is granted with the first and revoked
with the last.
"""

import logging
from typing import Any

from django.db import transaction
from django.utils import timezone
from django.utils.dateparse import parse_datetime

from capstone_backend.coordinators.models import CAPABILITIES
from capstone_backend.coordinators.models import ProjectCoordinator
from capstone_backend.coordinators.models import default_permissions
from capstone_backend.core.exceptions import BadRequestError
from capstone_backend.core.exceptions import NotFoundError
from capstone_backend.core.exceptions import PermissionDeniedError
from capstone_backend.core.exceptions import ValidationError
from capstone_backend.core.roles import Role
from capstone_backend.core.roles import assign_role
from capstone_backend.core.roles import is_admin
from capstone_backend.core.roles import remove_role
from capstone_backend.faculty.models import Faculty

logger = logging.getLogger(__name__)


def _check_capabilities(permissions: dict[str, Any]) -> None:
    unknown = sorted(set(permissions) - set(CAPABILITIES))
    if unknown:
        raise ValidationError(
            f"Unknown permissions: {', '.join(unknown)}",
            details={"unknown": unknown},
        )


def _merge_permissions(current: dict[str, dict], updates: dict[str, dict]) -> dict[str, dict]:
    merged = {capability: dict(entry) for capability, entry in current.items()}
    for capability, entry in updates.items():
        merged.setdefault(capability, {}).update(entry)
    return merged


def _unset_other_primaries(academic_year: str, school: str, department: str, keep=None) -> None:
    others = ProjectCoordinator.objects.filter(
        academic_year=academic_year,
        school=school,
        department=department,
        is_primary=True,
    )
    if keep is not None:
        others = others.exclude(pk=keep.pk)
    others.update(is_primary=False, modified=timezone.now())


def get_coordinator(coordinator_id) -> ProjectCoordinator:
    coordinator = ProjectCoordinator.objects.select_related("faculty__user").filter(id=coordinator_id).first()
    if coordinator is None:
        raise NotFoundError("Project coordinator not found.")
    return coordinator


def list_coordinators(
    academic_year: str | None = None,
    school: str | None = None,
    department: str | None = None,
    include_inactive: bool = False,
):
    queryset = ProjectCoordinator.objects.select_related("faculty")
    if not include_inactive:
        queryset = queryset.filter(is_active=True)
    if academic_year:
        queryset = queryset.filter(academic_year=academic_year)
    if school:
        queryset = queryset.filter(school=school)
    if department:
        queryset = queryset.filter(department=department)
    return queryset


def assign_coordinator(
    faculty_employee_id: str,
    academic_year: str,
    school: str,
    department: str,
    is_primary: bool = False,
    permissions: dict[str, dict] | None = None,
    assigned_by=None,
) -> ProjectCoordinator:
    """
    Make a faculty member coordinator of a scope.

    A new primary coordinator demotes the scope's previous primary.
    ``permissions`` are merged over the defaults for the record.
    """
    faculty = Faculty.objects.select_related("user").filter(employee_id=faculty_employee_id).first()
    if faculty is None:
        raise NotFoundError("Faculty not found.")
    if not faculty.is_active:
        raise BadRequestError("Inactive faculty cannot be made coordinators.")

    if ProjectCoordinator.objects.filter(
        faculty=faculty,
        academic_year=academic_year,
        school=school,
        department=department,
        is_active=True,
    ).exists():
        raise BadRequestError("This faculty is already a project coordinator for this context.")

    granted = default_permissions(is_primary)
    if permissions:
        _check_capabilities(permissions)
        granted = _merge_permissions(granted, permissions)

    with transaction.atomic():
        if is_primary:
            _unset_other_primaries(academic_year, school, department)
        coordinator = ProjectCoordinator.objects.create(
            faculty=faculty,
            academic_year=academic_year,
            school=school,
            department=department,
            is_primary=is_primary,
            permissions=granted,
        )
        assign_role(faculty.user, Role.PROJECT_COORDINATOR)

    logger.info(
        "EVENT: project_coordinator_assigned coordinator=%s faculty=%s scope=%s/%s/%s by=%s",
        coordinator.id,
        faculty_employee_id,
        academic_year,
        school,
        department,
        assigned_by,
    )
    return coordinator


def update_coordinator(coordinator_id, data: dict[str, Any], updated_by=None) -> ProjectCoordinator:
    """Update ``is_primary`` and/or ``is_active`` of a coordinator record."""
    coordinator = get_coordinator(coordinator_id)

    with transaction.atomic():
        if data.get("is_primary") is True and not coordinator.is_primary:
            _unset_other_primaries(
                coordinator.academic_year,
                coordinator.school,
                coordinator.department,
                keep=coordinator,
            )
        for field_name in ("is_primary", "is_active"):
            if data.get(field_name) is not None:
                setattr(coordinator, field_name, data[field_name])
        coordinator.save()
        _sync_role(coordinator.faculty)

    logger.info("EVENT: project_coordinator_updated coordinator=%s by=%s", coordinator.id, updated_by)
    return coordinator


def update_permissions(coordinator_id, permissions: dict[str, dict], updated_by=None) -> ProjectCoordinator:
    """Merge capability settings into a coordinator's permissions."""
    _check_capabilities(permissions)
    coordinator = get_coordinator(coordinator_id)
    coordinator.permissions = _merge_permissions(coordinator.permissions, permissions)
    coordinator.save(update_fields=["permissions", "modified"])

    logger.info(
        "EVENT: coordinator_permissions_updated coordinator=%s capabilities=%s by=%s",
        coordinator.id,
        sorted(permissions),
        updated_by,
    )
    return coordinator


def remove_coordinator(coordinator_id, removed_by=None) -> ProjectCoordinator:
    """Deactivate a coordinator record; the row is kept for history."""
    coordinator = get_coordinator(coordinator_id)
    with transaction.atomic():
        coordinator.is_active = False
        coordinator.save(update_fields=["is_active", "modified"])
        _sync_role(coordinator.faculty)

    logger.info("EVENT: project_coordinator_removed coordinator=%s by=%s", coordinator.id, removed_by)
    return coordinator


def _sync_role(faculty: Faculty) -> None:
    if faculty.coordinator_roles.filter(is_active=True).exists():
        assign_role(faculty.user, Role.PROJECT_COORDINATOR)
    else:
        remove_role(faculty.user, Role.PROJECT_COORDINATOR)


def coordinator_can(user, capability: str, academic_year: str, school: str, department: str) -> bool:
    """
    Whether the user coordinates the scope with ``capability`` enabled.

    A capability that does not follow the global deadline carries its own
    ``deadline``; once that has passed the capability no longer applies.
    """
    if not user or not user.is_authenticated:
        return False
    coordinator = ProjectCoordinator.objects.filter(
        faculty__user=user,
        academic_year=academic_year,
        school=school,
        department=department,
        is_active=True,
    ).first()
    if coordinator is None or not coordinator.can(capability):
        return False

    entry = coordinator.permissions.get(capability, {})
    if not entry.get("useGlobalDeadline", True) and entry.get("deadline"):
        deadline = parse_datetime(entry["deadline"])
        if deadline is not None and timezone.is_naive(deadline):
            deadline = timezone.make_aware(deadline)
        if deadline is not None and deadline < timezone.now():
            return False
    return True


def require_capability(user, capability: str, academic_year: str, school: str, department: str) -> None:
    """Let admins through; coordinators need ``capability`` in the scope."""
    if is_admin(user):
        return
    if not coordinator_can(user, capability, academic_year, school, department):
        raise PermissionDeniedError(
            f"Coordinator permission '{capability}' is required for {school}/{department}."
        )
