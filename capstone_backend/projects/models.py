"""
Capstone project model.
"""

from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _
from django_fsm import FSMField
from django_fsm import transition

from capstone_backend.core.models import ScopedModel


class ProjectStatus(models.TextChoices):
    """Status choices for projects (FSM states)."""

    ACTIVE = "active", _("Active")
    COMPLETED = "completed", _("Completed")


class Project(ScopedModel):
    """
    A student team's capstone project.

    Uses django-fsm for the status with a single protected transition:
    - active: team is being reviewed
    - completed: all reviews done, read-only from here on
    """

    name = models.CharField(_("name"), max_length=300)
    guide_faculty = models.ForeignKey(
        "faculty.Faculty",
        on_delete=models.PROTECT,
        related_name="guided_projects",
        verbose_name=_("guide"),
    )
    students = models.ManyToManyField(
        "students.Student",
        related_name="projects",
        verbose_name=_("students"),
    )
    panel = models.ForeignKey(
        "panels.Panel",
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="projects",
        verbose_name=_("panel"),
    )
    specialization = models.CharField(_("specialization"), max_length=200, blank=True)
    project_type = models.CharField(
        _("type"),
        max_length=50,
        blank=True,
        help_text=_("e.g. software, hardware, research"),
    )
    status = FSMField(
        _("status"),
        default=ProjectStatus.ACTIVE,
        choices=ProjectStatus.choices,
        protected=True,
    )
    best_project = models.BooleanField(_("best project"), default=False)
    completed_at = models.DateTimeField(_("completed at"), null=True, blank=True)

    class Meta:
        verbose_name = _("project")
        verbose_name_plural = _("projects")
        ordering = ["-created"]

    def __str__(self) -> str:
        return self.name

    @transition(field=status, source=ProjectStatus.ACTIVE, target=ProjectStatus.COMPLETED)
    def complete(self):
        """Close the project once all reviews are done."""
        self.completed_at = timezone.now()
