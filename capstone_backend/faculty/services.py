"""
Faculty account management.

A faculty member is a login account (User) plus a Faculty profile; the
role group of the account follows the profile's ``role``.
"""

import logging
from typing import Any

from django.db import transaction

from capstone_backend.core.batch import BatchResult
from capstone_backend.core.exceptions import AlreadyExistsError
from capstone_backend.core.exceptions import APIException
from capstone_backend.core.exceptions import BadRequestError
from capstone_backend.core.exceptions import NotFoundError
from capstone_backend.core.exceptions import ValidationError
from capstone_backend.core.roles import Role
from capstone_backend.core.roles import assign_role
from capstone_backend.core.roles import remove_role
from capstone_backend.faculty.models import Faculty
from capstone_backend.faculty.models import FacultyRole
from capstone_backend.users.models import User

logger = logging.getLogger(__name__)

SORTABLE_FIELDS = {"name", "employee_id", "email_id", "created"}
PROFILE_FIELDS = ("name", "phone_number", "schools", "departments", "specializations", "is_active")


def _role_group(role: str) -> Role:
    return Role.ADMIN if role == FacultyRole.ADMIN else Role.FACULTY


def get_faculty(employee_id: str) -> Faculty:
    faculty = Faculty.objects.select_related("user").filter(employee_id=employee_id).first()
    if faculty is None:
        raise NotFoundError("Faculty not found.")
    return faculty


def get_faculty_for_user(user) -> Faculty:
    faculty = Faculty.objects.filter(user=user).first()
    if faculty is None:
        raise NotFoundError("No faculty profile is linked to this account.")
    return faculty


def create_faculty(data: dict[str, Any], created_by=None) -> Faculty:
    """
    Create the account and profile of a faculty member.

    ``data`` holds employee_id, name, email_id and optionally phone_number,
    role, schools, departments, specializations and password.
    """
    employee_id = data["employee_id"]
    email = data["email_id"].lower()

    if Faculty.objects.filter(employee_id=employee_id).exists():
        raise AlreadyExistsError(f"Faculty with employee ID {employee_id} already exists.")
    if (
        Faculty.objects.filter(email_id__iexact=email).exists()
        or User.objects.filter(email__iexact=email).exists()
    ):
        raise AlreadyExistsError(f"Faculty with email {email} already exists.")

    role = data.get("role") or FacultyRole.FACULTY
    with transaction.atomic():
        user = User.objects.create_user(
            email=email,
            password=data.get("password"),
            first_name=data["name"],
        )
        faculty = Faculty.objects.create(
            user=user,
            employee_id=employee_id,
            name=data["name"],
            email_id=email,
            phone_number=data.get("phone_number") or "",
            role=role,
            schools=list(data.get("schools") or []),
            departments=list(data.get("departments") or []),
            specializations=list(data.get("specializations") or []),
        )
        assign_role(user, _role_group(role))

    logger.info(
        "EVENT: faculty_created employee_id=%s role=%s by=%s",
        employee_id,
        role,
        created_by,
    )
    return faculty


def create_admin(data: dict[str, Any], created_by=None) -> Faculty:
    return create_faculty({**data, "role": FacultyRole.ADMIN}, created_by=created_by)


def list_faculty(
    school: str | None = None,
    department: str | None = None,
    role: str | None = None,
    specialization: str | None = None,
    search: str | None = None,
    sort_by: str = "name",
    sort_order: str = "asc",
) -> list[Faculty]:
    """
    Filter and sort faculty.

    School, department and specialization are list fields, so membership
    is checked in Python rather than in the query.
    """
    if sort_by not in SORTABLE_FIELDS:
        raise ValidationError(f"Cannot sort by {sort_by}.")

    queryset = Faculty.objects.select_related("user")
    if role:
        queryset = queryset.filter(role=role)
    if search:
        queryset = queryset.filter(name__icontains=search) | queryset.filter(employee_id__icontains=search)
    ordering = sort_by if sort_order == "asc" else f"-{sort_by}"
    queryset = queryset.order_by(ordering)

    return [
        f for f in queryset
        if f.belongs_to(school, department)
        and (not specialization or specialization in f.specializations)
    ]


def update_faculty(employee_id: str, data: dict[str, Any], updated_by=None) -> Faculty:
    """Update a profile; keys absent from ``data`` are left unchanged."""
    faculty = get_faculty(employee_id)
    user = faculty.user

    with transaction.atomic():
        email = data.get("email_id")
        if email and email.lower() != faculty.email_id:
            email = email.lower()
            if (
                Faculty.objects.filter(email_id__iexact=email).exclude(pk=faculty.pk).exists()
                or User.objects.filter(email__iexact=email).exclude(pk=user.pk).exists()
            ):
                raise AlreadyExistsError(f"Faculty with email {email} already exists.")
            faculty.email_id = email
            user.email = email

        for field_name in PROFILE_FIELDS:
            if data.get(field_name) is not None:
                setattr(faculty, field_name, data[field_name])

        new_role = data.get("role")
        if new_role and new_role != faculty.role:
            remove_role(user, _role_group(faculty.role))
            assign_role(user, _role_group(new_role))
            faculty.role = new_role

        if data.get("password"):
            user.set_password(data["password"])
        user.first_name = faculty.name
        user.is_active = faculty.is_active
        user.save()
        faculty.save()

    logger.info("EVENT: faculty_updated employee_id=%s by=%s", employee_id, updated_by)
    return faculty


def delete_faculty(employee_id: str, deleted_by=None) -> None:
    """Delete a faculty member and their account; refused while they guide or review."""
    faculty = get_faculty(employee_id)

    guided = faculty.guided_projects.count()
    if guided:
        raise BadRequestError(f"Cannot delete faculty guiding {guided} projects.")
    panels = faculty.panel_memberships.count()
    if panels:
        raise BadRequestError(f"Cannot delete faculty assigned to {panels} panels.")

    faculty.user.delete()
    logger.info("EVENT: faculty_deleted employee_id=%s by=%s", employee_id, deleted_by)


def bulk_create_faculty(rows: list[dict[str, Any]], created_by=None) -> BatchResult:
    """Create faculty one row at a time; failing rows are reported, not raised."""
    result = BatchResult()
    for index, row in enumerate(rows):
        try:
            create_faculty(row, created_by=created_by)
        except APIException as exc:
            result.add_error(exc.message, row=index, employee_id=row.get("employee_id"))
            continue
        result.created += 1

    logger.info(
        "EVENT: faculty_bulk_created created=%d errors=%d by=%s",
        result.created,
        result.errors,
        created_by,
    )
    return result
