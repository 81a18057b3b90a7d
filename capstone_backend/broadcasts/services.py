"""
Broadcast notice services.
"""

import logging
from typing import Any

from django.utils import timezone
from django.utils.dateparse import parse_datetime

from capstone_backend.broadcasts.models import BroadcastAction
from capstone_backend.broadcasts.models import BroadcastMessage
from capstone_backend.broadcasts.models import BroadcastPriority
from capstone_backend.core.exceptions import NotFoundError
from capstone_backend.core.exceptions import ValidationError
from capstone_backend.faculty.models import Faculty

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = (
    "title",
    "message",
    "target_schools",
    "target_departments",
    "target_academic_years",
    "expires_at",
    "is_active",
    "action",
    "priority",
)


def _check_choices(action: str | None, priority: str | None) -> None:
    if action is not None and action not in BroadcastAction.values:
        raise ValidationError("Action must be 'notice' or 'block'.")
    if priority is not None and priority not in BroadcastPriority.values:
        raise ValidationError("Priority must be 'low', 'medium', 'high', or 'urgent'.")


def _as_datetime(value):
    if isinstance(value, str):
        value = parse_datetime(value)
        if value is None:
            raise ValidationError("Expiration date is not a valid date.")
    if timezone.is_naive(value):
        value = timezone.make_aware(value)
    return value


def get_broadcast(broadcast_id) -> BroadcastMessage:
    broadcast = BroadcastMessage.objects.filter(id=broadcast_id).first()
    if broadcast is None:
        raise NotFoundError("Broadcast not found.")
    return broadcast


def create_broadcast(data: dict[str, Any], created_by) -> BroadcastMessage:
    message = data.get("message")
    expires_at = data.get("expires_at")
    if not message or not expires_at:
        raise ValidationError("Message and expiration date are required.")
    action = data.get("action") or BroadcastAction.NOTICE
    priority = data.get("priority") or BroadcastPriority.MEDIUM
    _check_choices(action, priority)

    faculty = getattr(created_by, "faculty_profile", None)
    broadcast = BroadcastMessage.objects.create(
        title=data.get("title") or "",
        message=message,
        target_schools=data.get("target_schools") or [],
        target_departments=data.get("target_departments") or [],
        target_academic_years=data.get("target_academic_years") or [],
        created_by=created_by,
        created_by_employee_id=faculty.employee_id if faculty else "",
        created_by_name=faculty.name if faculty else created_by.get_full_name(),
        expires_at=_as_datetime(expires_at),
        is_active=True,
        action=action,
        priority=priority,
    )
    logger.info(
        "EVENT: broadcast_created broadcast=%s action=%s priority=%s schools=%d departments=%d by=%s",
        broadcast.id,
        action,
        priority,
        len(broadcast.target_schools),
        len(broadcast.target_departments),
        created_by,
    )
    return broadcast


def list_broadcasts(
    is_active: bool | None = None,
    action: str | None = None,
    school: str | None = None,
    department: str | None = None,
    academic_year: str | None = None,
) -> list[BroadcastMessage]:
    """
    Broadcasts, newest first.

    Expired broadcasts are switched off before listing. Audience filters
    match broadcasts whose target list is empty or contains the value.
    """
    deactivated = BroadcastMessage.objects.deactivate_expired()
    if deactivated:
        logger.info("EVENT: broadcasts_expired count=%d", deactivated)

    queryset = BroadcastMessage.objects.all()
    if is_active is not None:
        queryset = queryset.filter(is_active=is_active)
    if action:
        queryset = queryset.filter(action=action)
    return [
        broadcast
        for broadcast in queryset.order_by("-created")
        if broadcast.targets(school=school, department=department, academic_year=academic_year)
    ]


def broadcasts_for_faculty(faculty: Faculty, academic_year: str | None = None) -> list[BroadcastMessage]:
    """Active broadcasts reaching any of the faculty member's schools and departments."""

    def reaches(targets: list[str], values: list[str]) -> bool:
        return not targets or any(value in targets for value in values)

    return [
        broadcast
        for broadcast in list_broadcasts(is_active=True, academic_year=academic_year)
        if reaches(broadcast.target_schools, faculty.schools)
        and reaches(broadcast.target_departments, faculty.departments)
    ]


def update_broadcast(broadcast_id, updates: dict[str, Any], updated_by=None) -> BroadcastMessage:
    broadcast = get_broadcast(broadcast_id)
    _check_choices(updates.get("action"), updates.get("priority"))

    for field_name in UPDATABLE_FIELDS:
        if updates.get(field_name) is None:
            continue
        value = updates[field_name]
        if field_name == "expires_at":
            value = _as_datetime(value)
        setattr(broadcast, field_name, value)
    broadcast.save()

    logger.info("EVENT: broadcast_updated broadcast=%s by=%s", broadcast.id, updated_by)
    return broadcast


def delete_broadcast(broadcast_id, deleted_by=None) -> None:
    broadcast = get_broadcast(broadcast_id)
    broadcast.delete()
    logger.info("EVENT: broadcast_deleted broadcast=%s by=%s", broadcast_id, deleted_by)
