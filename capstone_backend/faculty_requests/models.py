"""
Requests from faculty to the admin office, typically to reopen mark entry
after a review deadline.
"""

from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _
from django_fsm import FSMField
from django_fsm import transition

from capstone_backend.core.models import BaseModel


class RequestCategory(models.TextChoices):
    GUIDE = "guide", _("Guide")
    PANEL = "panel", _("Panel")


class RequestStatus(models.TextChoices):
    """Status choices for requests (FSM states)."""

    PENDING = "pending", _("Pending")
    APPROVED = "approved", _("Approved")
    REJECTED = "rejected", _("Rejected")


class FacultyRequest(BaseModel):
    """
    Faculty request, resolved once by an admin.

    pending -> approved | rejected. An approved request may carry a new
    deadline that replaces the review deadline for that faculty member.
    """

    faculty = models.ForeignKey(
        "faculty.Faculty",
        on_delete=models.CASCADE,
        related_name="requests",
        verbose_name=_("faculty"),
    )
    project = models.ForeignKey(
        "projects.Project",
        on_delete=models.CASCADE,
        related_name="faculty_requests",
        verbose_name=_("project"),
    )
    student = models.ForeignKey(
        "students.Student",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="faculty_requests",
        verbose_name=_("student"),
    )
    category = models.CharField(_("category"), max_length=10, choices=RequestCategory.choices)
    review_name = models.CharField(_("review"), max_length=100)
    message = models.TextField(_("message"))
    status = FSMField(
        _("status"),
        default=RequestStatus.PENDING,
        choices=RequestStatus.choices,
        protected=True,
    )
    remarks = models.TextField(_("remarks"), blank=True)
    new_deadline = models.DateTimeField(_("new deadline"), null=True, blank=True)
    resolved_by = models.ForeignKey(
        "users.User",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="resolved_requests",
        verbose_name=_("resolved by"),
    )
    resolved_at = models.DateTimeField(_("resolved at"), null=True, blank=True)

    class Meta:
        verbose_name = _("faculty request")
        verbose_name_plural = _("faculty requests")
        ordering = ["-created"]

    def __str__(self) -> str:
        return f"{self.faculty} {self.review_name} ({self.status})"

    @transition(field=status, source=RequestStatus.PENDING, target=RequestStatus.APPROVED)
    def approve(self, by, remarks: str = "", new_deadline=None):
        self.remarks = remarks
        self.new_deadline = new_deadline
        self.resolved_by = by
        self.resolved_at = timezone.now()

    @transition(field=status, source=RequestStatus.PENDING, target=RequestStatus.REJECTED)
    def reject(self, by, remarks: str = ""):
        self.remarks = remarks
        self.resolved_by = by
        self.resolved_at = timezone.now()
