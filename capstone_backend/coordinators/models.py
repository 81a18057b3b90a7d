from django.db import models
from django.utils.translation import gettext_lazy as _

from capstone_backend.core.models import ScopedModel

CAPABILITIES = (
    "canEdit",
    "canView",
    "canCreateFaculty",
    "canCreatePanels",
    "canUploadStudents",
    "canAssignGuides",
    "canReassignGuides",
    "canMergeTeams",
    "canEditMarkingSchema",
)


def default_permissions(is_primary: bool = False) -> dict[str, dict]:
    """
    Capability map for a new coordinator.

    Everything is enabled except schema editing, which only the primary
    coordinator of a scope gets.
    """
    return {
        capability: {
            "enabled": is_primary if capability == "canEditMarkingSchema" else True,
            "useGlobalDeadline": True,
        }
        for capability in CAPABILITIES
    }


class ProjectCoordinator(ScopedModel):
    """Faculty member granted admin capabilities within one scope."""

    faculty = models.ForeignKey(
        "faculty.Faculty",
        on_delete=models.CASCADE,
        related_name="coordinator_roles",
        verbose_name=_("faculty"),
    )
    is_primary = models.BooleanField(_("primary"), default=False)
    permissions = models.JSONField(_("permissions"), default=default_permissions)
    is_active = models.BooleanField(_("active"), default=True)

    class Meta:
        verbose_name = _("project coordinator")
        verbose_name_plural = _("project coordinators")
        ordering = ["-is_primary", "created"]
        constraints = [
            models.UniqueConstraint(
                fields=["faculty", "academic_year", "school", "department"],
                condition=models.Q(is_active=True),
                name="unique_active_coordinator_per_scope",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.faculty} - {self.academic_year} {self.school}/{self.department}"

    def can(self, capability: str) -> bool:
        return bool(self.permissions.get(capability, {}).get("enabled"))
