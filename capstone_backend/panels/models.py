"""
Models for review panels.

Contains:
- Panel: A group of faculty that evaluates a bounded number of projects
- PanelMember: Ordered membership; position 0 is the chair
"""

from django.db import models
from django.utils.translation import gettext_lazy as _

from capstone_backend.core.models import BaseModel
from capstone_backend.core.models import ScopedModel


class PanelType(models.TextChoices):
    REGULAR = "regular", _("Regular")
    TEMPORARY = "temporary", _("Temporary")


class MemberRole(models.TextChoices):
    CHAIR = "chair", _("Chair")
    MEMBER = "member", _("Member")


class Panel(ScopedModel):
    """
    Review panel for one academic scope.

    ``assigned_projects_count`` is a denormalised counter kept in step with
    the projects that reference the panel; it never exceeds
    ``max_projects``.
    """

    panel_name = models.CharField(_("panel name"), max_length=200)
    members = models.ManyToManyField(
        "faculty.Faculty",
        through="PanelMember",
        related_name="panels",
        verbose_name=_("members"),
    )
    venue = models.CharField(_("venue"), max_length=200, blank=True)
    specializations = models.JSONField(_("specializations"), default=list, blank=True)
    panel_type = models.CharField(
        _("panel type"),
        max_length=10,
        choices=PanelType.choices,
        default=PanelType.REGULAR,
    )
    max_projects = models.PositiveIntegerField(_("maximum projects"), default=10)
    assigned_projects_count = models.PositiveIntegerField(_("assigned projects"), default=0)
    is_active = models.BooleanField(_("active"), default=True)
    created_by = models.ForeignKey(
        "users.User",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="created_panels",
        verbose_name=_("created by"),
    )

    class Meta:
        verbose_name = _("panel")
        verbose_name_plural = _("panels")
        ordering = ["-created"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(assigned_projects_count__lte=models.F("max_projects")),
                name="panel_assigned_within_capacity",
            ),
        ]

    def __str__(self) -> str:
        return self.panel_name

    @property
    def has_capacity(self) -> bool:
        return self.assigned_projects_count < self.max_projects


class PanelMember(BaseModel):
    panel = models.ForeignKey(
        Panel,
        on_delete=models.CASCADE,
        related_name="memberships",
        verbose_name=_("panel"),
    )
    faculty = models.ForeignKey(
        "faculty.Faculty",
        on_delete=models.CASCADE,
        related_name="panel_memberships",
        verbose_name=_("faculty"),
    )
    role = models.CharField(
        _("role"),
        max_length=10,
        choices=MemberRole.choices,
        default=MemberRole.MEMBER,
    )
    position = models.PositiveSmallIntegerField(_("position"), default=0)

    class Meta:
        verbose_name = _("panel member")
        verbose_name_plural = _("panel members")
        ordering = ["panel", "position"]
        constraints = [
            models.UniqueConstraint(fields=["panel", "faculty"], name="unique_panel_member"),
        ]

    def __str__(self) -> str:
        return f"{self.panel} - {self.faculty} ({self.role})"
