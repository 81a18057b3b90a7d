"""
Master data and department configuration services.
"""

import logging

from django.db import IntegrityError
from django.db import transaction

from capstone_backend.academics.models import AcademicYear
from capstone_backend.academics.models import Department
from capstone_backend.academics.models import DepartmentConfig
from capstone_backend.academics.models import School
from capstone_backend.core.exceptions import AlreadyExistsError
from capstone_backend.core.exceptions import NotFoundError
from capstone_backend.core.exceptions import ValidationError

logger = logging.getLogger(__name__)


def create_school(code: str, name: str) -> School:
    if School.objects.filter(code__iexact=code).exists():
        raise AlreadyExistsError(f"School {code} already exists.")
    school = School.objects.create(code=code, name=name)
    logger.info("EVENT: school_created code=%s", code)
    return school


def create_department(school_code: str, code: str, name: str) -> Department:
    school = School.objects.filter(code=school_code).first()
    if school is None:
        raise NotFoundError("School not found.")
    try:
        with transaction.atomic():
            department = Department.objects.create(school=school, code=code, name=name)
    except IntegrityError as exc:
        raise AlreadyExistsError(f"Department {code} already exists in {school_code}.") from exc
    logger.info("EVENT: department_created school=%s code=%s", school_code, code)
    return department


def create_academic_year(year: str, is_active: bool = True) -> AcademicYear:
    if AcademicYear.objects.filter(year=year).exists():
        raise AlreadyExistsError(f"Academic year {year} already exists.")
    academic_year = AcademicYear.objects.create(year=year, is_active=is_active)
    logger.info("EVENT: academic_year_created year=%s", year)
    return academic_year


def get_department_config(academic_year: str, school: str, department: str) -> DepartmentConfig:
    config = DepartmentConfig.objects.filter(
        academic_year=academic_year,
        school=school,
        department=department,
    ).first()
    if config is None:
        raise NotFoundError("Department configuration not found.")
    return config


def upsert_department_config(
    academic_year: str,
    school: str,
    department: str,
    **sizes: int,
) -> DepartmentConfig:
    """Create or update the config of a scope; omitted sizes keep their value."""
    config = DepartmentConfig.objects.filter(
        academic_year=academic_year,
        school=school,
        department=department,
    ).first()
    created = config is None
    if created:
        config = DepartmentConfig(academic_year=academic_year, school=school, department=department)
    for field_name, value in sizes.items():
        if value is not None:
            setattr(config, field_name, value)

    if config.min_panel_size < 1 or config.min_panel_size > config.max_panel_size:
        raise ValidationError("Minimum panel size must be between 1 and the maximum panel size.")
    if config.min_team_size < 1 or config.min_team_size > config.max_team_size:
        raise ValidationError("Minimum team size must be between 1 and the maximum team size.")

    config.save()
    logger.info(
        "EVENT: department_config_%s scope=%s/%s/%s",
        "created" if created else "updated",
        academic_year,
        school,
        department,
    )
    return config
