"""
Master data: schools, departments, academic years, and per-department
configuration of panel and team sizes.
"""

from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _

from capstone_backend.core.models import BaseModel
from capstone_backend.core.models import ScopedModel


class School(BaseModel):
    code = models.CharField(_("code"), max_length=50, unique=True)
    name = models.CharField(_("name"), max_length=200)

    class Meta:
        verbose_name = _("school")
        verbose_name_plural = _("schools")
        ordering = ["code"]

    def __str__(self) -> str:
        return self.code


class Department(BaseModel):
    school = models.ForeignKey(
        School,
        on_delete=models.CASCADE,
        related_name="departments",
        verbose_name=_("school"),
    )
    code = models.CharField(_("code"), max_length=100)
    name = models.CharField(_("name"), max_length=200)

    class Meta:
        verbose_name = _("department")
        verbose_name_plural = _("departments")
        ordering = ["school__code", "code"]
        constraints = [
            models.UniqueConstraint(fields=["school", "code"], name="unique_department_per_school"),
        ]

    def __str__(self) -> str:
        return f"{self.school.code}/{self.code}"


class AcademicYear(BaseModel):
    year = models.CharField(
        _("year"),
        max_length=9,
        unique=True,
        help_text=_("Academic year in YYYY-YYYY form"),
    )
    is_active = models.BooleanField(_("active"), default=True)

    class Meta:
        verbose_name = _("academic year")
        verbose_name_plural = _("academic years")
        ordering = ["-year"]

    def __str__(self) -> str:
        return self.year


class DepartmentConfig(ScopedModel):
    """
    Size limits for one (academic year, school, department).

    Panels and teams created in the scope are validated against these
    bounds; scopes without a row fall back to the settings defaults.
    """

    min_panel_size = models.PositiveSmallIntegerField(_("minimum panel size"), default=1)
    max_panel_size = models.PositiveSmallIntegerField(_("maximum panel size"), default=5)
    min_team_size = models.PositiveSmallIntegerField(_("minimum team size"), default=1)
    max_team_size = models.PositiveSmallIntegerField(_("maximum team size"), default=4)

    class Meta:
        verbose_name = _("department configuration")
        verbose_name_plural = _("department configurations")
        constraints = [
            models.UniqueConstraint(
                fields=["academic_year", "school", "department"],
                name="unique_department_config_scope",
            ),
            models.CheckConstraint(
                condition=models.Q(min_panel_size__lte=models.F("max_panel_size")),
                name="department_config_panel_bounds",
            ),
            models.CheckConstraint(
                condition=models.Q(min_team_size__lte=models.F("max_team_size")),
                name="department_config_team_bounds",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.academic_year} {self.school}/{self.department}"

    @classmethod
    def panel_bounds(cls, academic_year: str, school: str, department: str) -> tuple[int, int]:
        """Return (min, max) panel size for a scope."""
        config = cls.objects.filter(
            academic_year=academic_year,
            school=school,
            department=department,
        ).first()
        if config is None:
            return settings.PANEL_DEFAULT_MIN_SIZE, settings.PANEL_DEFAULT_MAX_SIZE
        return config.min_panel_size, config.max_panel_size

    @classmethod
    def team_bounds(cls, academic_year: str, school: str, department: str) -> tuple[int, int] | None:
        """Return (min, max) team size, or None when the scope has no config."""
        config = cls.objects.filter(
            academic_year=academic_year,
            school=school,
            department=department,
        ).first()
        if config is None:
            return None
        return config.min_team_size, config.max_team_size
