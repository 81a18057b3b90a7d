from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _

from capstone_backend.core.models import BaseModel


class FacultyRole(models.TextChoices):
    FACULTY = "faculty", _("Faculty")
    ADMIN = "admin", _("Admin")


class Faculty(BaseModel):
    """
    Academic profile of a staff member.

    Schools, departments and specializations are plain string lists; a
    faculty member may belong to several of each.
    """

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="faculty_profile",
        verbose_name=_("user"),
    )
    employee_id = models.CharField(_("employee id"), max_length=50, unique=True)
    name = models.CharField(_("name"), max_length=200)
    email_id = models.EmailField(_("email"), unique=True)
    phone_number = models.CharField(_("phone number"), max_length=20, blank=True)
    role = models.CharField(
        _("role"),
        max_length=10,
        choices=FacultyRole.choices,
        default=FacultyRole.FACULTY,
    )
    schools = models.JSONField(_("schools"), default=list, blank=True)
    departments = models.JSONField(_("departments"), default=list, blank=True)
    specializations = models.JSONField(
        _("specializations"),
        default=list,
        blank=True,
        help_text=_("Areas the faculty member can guide or review"),
    )
    is_active = models.BooleanField(_("active"), default=True)

    class Meta:
        verbose_name = _("faculty member")
        verbose_name_plural = _("faculty members")
        ordering = ["employee_id"]

    def __str__(self) -> str:
        return f"{self.name} ({self.employee_id})"

    def belongs_to(self, school: str | None = None, department: str | None = None) -> bool:
        """Check school/department membership; ``None`` matches anything."""
        if school and school not in self.schools:
            return False
        if department and department not in self.departments:
            return False
        return True
