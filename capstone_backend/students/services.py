"""
Student roster services.
"""

import logging
from typing import Any

from django.db import transaction

from capstone_backend.core.batch import BatchResult
from capstone_backend.students.models import Student

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("reg_no", "name", "email_id")


def list_students(
    academic_year: str | None = None,
    school: str | None = None,
    department: str | None = None,
    reg_no: str | None = None,
    is_active: bool | None = None,
):
    queryset = Student.objects.all()
    if academic_year:
        queryset = queryset.filter(academic_year=academic_year)
    if school:
        queryset = queryset.filter(school=school)
    if department:
        queryset = queryset.filter(department=department)
    if reg_no:
        queryset = queryset.filter(reg_no__icontains=reg_no)
    if is_active is not None:
        queryset = queryset.filter(is_active=is_active)
    return queryset.order_by("reg_no")


def upload_students(
    rows: list[dict[str, Any]],
    academic_year: str,
    school: str,
    department: str,
    uploaded_by=None,
) -> BatchResult:
    """
    Create or update students of one scope from already-parsed rows.

    A row matches an existing student on (reg_no, academic_year); matched
    students are moved into the scope and their details refreshed.
    """
    result = BatchResult()
    for index, row in enumerate(rows):
        if any(not row.get(field_name) for field_name in REQUIRED_FIELDS):
            result.add_error(
                "Missing required fields: regNo, name, or emailId",
                row=index,
                reg_no=row.get("reg_no"),
            )
            continue

        defaults = {
            "name": row["name"],
            "email_id": row["email_id"].lower(),
            "school": school,
            "department": department,
            "is_active": True,
        }
        if row.get("pat") is not None:
            defaults["pat"] = row["pat"]

        with transaction.atomic():
            _, created = Student.objects.update_or_create(
                reg_no=row["reg_no"],
                academic_year=academic_year,
                defaults=defaults,
            )
        if created:
            result.created += 1
        else:
            result.updated += 1

    logger.info(
        "EVENT: students_uploaded scope=%s/%s/%s created=%d updated=%d errors=%d by=%s",
        academic_year,
        school,
        department,
        result.created,
        result.updated,
        result.errors,
        uploaded_by,
    )
    return result
