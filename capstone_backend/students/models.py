from django.db import models
from django.utils.translation import gettext_lazy as _

from capstone_backend.core.models import ScopedModel


class Student(ScopedModel):
    """A student enrolled for the capstone in one academic year."""

    reg_no = models.CharField(_("registration number"), max_length=50)
    name = models.CharField(_("name"), max_length=200)
    email_id = models.EmailField(_("email"))
    pat = models.BooleanField(
        _("PAT"),
        default=False,
        help_text=_("Placement and training leave; no marks are entered while set"),
    )
    is_active = models.BooleanField(_("active"), default=True)

    class Meta:
        verbose_name = _("student")
        verbose_name_plural = _("students")
        ordering = ["reg_no"]
        constraints = [
            models.UniqueConstraint(
                fields=["reg_no", "academic_year"],
                name="unique_student_per_academic_year",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.reg_no} - {self.name}"
