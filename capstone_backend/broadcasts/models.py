from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from capstone_backend.core.models import BaseModel


class BroadcastAction(models.TextChoices):
    NOTICE = "notice", _("Notice")
    BLOCK = "block", _("Block")


class BroadcastPriority(models.TextChoices):
    LOW = "low", _("Low")
    MEDIUM = "medium", _("Medium")
    HIGH = "high", _("High")
    URGENT = "urgent", _("Urgent")


class BroadcastQuerySet(models.QuerySet):
    def expired(self, now=None):
        return self.filter(is_active=True, expires_at__lte=now or timezone.now())

    def deactivate_expired(self, now=None) -> int:
        return self.expired(now).update(is_active=False)


class BroadcastMessage(BaseModel):
    """
    Notice shown to faculty until it expires.

    Empty target lists mean "everyone": a broadcast with no target schools
    reaches every school.
    """

    title = models.CharField(_("title"), max_length=200, blank=True)
    message = models.TextField(_("message"))
    target_schools = models.JSONField(_("target schools"), default=list, blank=True)
    target_departments = models.JSONField(_("target departments"), default=list, blank=True)
    target_academic_years = models.JSONField(_("target academic years"), default=list, blank=True)
    created_by = models.ForeignKey(
        "users.User",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="broadcasts",
        verbose_name=_("created by"),
    )
    created_by_employee_id = models.CharField(_("creator employee id"), max_length=50, blank=True)
    created_by_name = models.CharField(_("creator name"), max_length=200, blank=True)
    expires_at = models.DateTimeField(_("expires at"))
    is_active = models.BooleanField(_("active"), default=True)
    action = models.CharField(
        _("action"),
        max_length=10,
        choices=BroadcastAction.choices,
        default=BroadcastAction.NOTICE,
        help_text=_("'block' notices stop faculty from working until dismissed"),
    )
    priority = models.CharField(
        _("priority"),
        max_length=10,
        choices=BroadcastPriority.choices,
        default=BroadcastPriority.MEDIUM,
    )

    objects = BroadcastQuerySet.as_manager()

    class Meta:
        verbose_name = _("broadcast message")
        verbose_name_plural = _("broadcast messages")
        ordering = ["-created"]

    def __str__(self) -> str:
        return self.title or self.message[:50]

    def targets(self, school: str | None = None, department: str | None = None,
                academic_year: str | None = None) -> bool:
        """Whether the broadcast reaches the given audience."""
        checks = (
            (self.target_schools, school),
            (self.target_departments, department),
            (self.target_academic_years, academic_year),
        )
        return all(not targets or value is None or value in targets for targets, value in checks)
