"""
Models for review rubrics and mark entry.

Contains:
- MarkingSchema: Per-scope list of reviews, each with a rubric
- Marks: One faculty member's marks for one student in one review
- ReviewFeedback: Team-level comment and PPT approval for one review
"""

from django.db import models
from django.utils.translation import gettext_lazy as _

from capstone_backend.core.models import BaseModel
from capstone_backend.core.models import ScopedModel


class FacultyType(models.TextChoices):
    GUIDE = "guide", _("Guide")
    PANEL = "panel", _("Panel")


class Attendance(models.TextChoices):
    PRESENT = "present", _("Present")
    ABSENT = "absent", _("Absent")


class MarkingSchema(ScopedModel):
    """
    Review rubric for one scope.

    ``reviews`` is a list of review dicts::

        {
            "review_name": "review1",
            "display_name": "Review 1",
            "faculty_type": "guide",
            "deadline": "2026-02-01T18:00:00+05:30" | None,
            "requires_ppt": False,
            "components": [
                {
                    "component_id": "design",
                    "name": "Design",
                    "description": "",
                    "max_marks": 10,
                    "levels": [{"score": 1, "label": "Poor", "description": ""}, ...],
                },
            ],
        }
    """

    reviews = models.JSONField(_("reviews"), default=list)

    class Meta:
        verbose_name = _("marking schema")
        verbose_name_plural = _("marking schemas")
        constraints = [
            models.UniqueConstraint(
                fields=["academic_year", "school", "department"],
                name="unique_marking_schema_scope",
            ),
        ]

    def __str__(self) -> str:
        return f"Marking schema {self.academic_year} {self.school}/{self.department}"

    def get_review(self, review_name: str) -> dict | None:
        for review in self.reviews:
            if review.get("review_name") == review_name:
                return review
        return None


class Marks(BaseModel):
    student = models.ForeignKey(
        "students.Student",
        on_delete=models.CASCADE,
        related_name="marks",
        verbose_name=_("student"),
    )
    project = models.ForeignKey(
        "projects.Project",
        on_delete=models.CASCADE,
        related_name="marks",
        verbose_name=_("project"),
    )
    faculty = models.ForeignKey(
        "faculty.Faculty",
        on_delete=models.CASCADE,
        related_name="marks_given",
        verbose_name=_("faculty"),
    )
    review_name = models.CharField(_("review"), max_length=100)
    faculty_type = models.CharField(_("faculty type"), max_length=10, choices=FacultyType.choices)
    component_marks = models.JSONField(
        _("component marks"),
        default=dict,
        help_text=_("Criterion id to rubric level score"),
    )
    total_marks = models.DecimalField(_("total marks"), max_digits=7, decimal_places=2, default=0)
    max_total_marks = models.DecimalField(_("maximum total"), max_digits=7, decimal_places=2, default=0)
    attendance = models.CharField(
        _("attendance"),
        max_length=10,
        choices=Attendance.choices,
        default=Attendance.PRESENT,
    )
    pat = models.BooleanField(_("PAT"), default=False)
    is_submitted = models.BooleanField(_("submitted"), default=False)

    class Meta:
        verbose_name = _("marks")
        verbose_name_plural = _("marks")
        ordering = ["review_name", "student__reg_no"]
        constraints = [
            models.UniqueConstraint(
                fields=["student", "faculty", "review_name"],
                name="unique_marks_per_student_faculty_review",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.student} {self.review_name}: {self.total_marks}"


class ReviewFeedback(BaseModel):
    project = models.ForeignKey(
        "projects.Project",
        on_delete=models.CASCADE,
        related_name="review_feedback",
        verbose_name=_("project"),
    )
    faculty = models.ForeignKey(
        "faculty.Faculty",
        on_delete=models.CASCADE,
        related_name="review_feedback",
        verbose_name=_("faculty"),
    )
    review_name = models.CharField(_("review"), max_length=100)
    team_comment = models.TextField(_("team comment"))
    ppt_approved = models.BooleanField(_("PPT approved"), default=False)

    class Meta:
        verbose_name = _("review feedback")
        verbose_name_plural = _("review feedback")
        constraints = [
            models.UniqueConstraint(
                fields=["project", "faculty", "review_name"],
                name="unique_feedback_per_project_faculty_review",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.project} {self.review_name} ({self.faculty})"
