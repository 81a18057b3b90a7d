import uuid

from django.db import models
from django.utils.translation import gettext_lazy as _
from model_utils.models import TimeStampedModel


class BaseModel(TimeStampedModel):
    """
    Base model with UUID primary key and created/modified timestamps.

    All models should inherit from this class for consistency.
    Provides:
        - id: UUIDField as primary key
        - created: DateTimeField auto-set on creation
        - modified: DateTimeField auto-updated on save
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    class Meta:
        abstract = True


class ScopedModel(BaseModel):
    """
    Base model for records that belong to one academic scope.

    A scope is the (academic year, school, department) triple the admin
    screens filter on, e.g. ("2025-2026", "SCOPE", "CSE").
    """

    academic_year = models.CharField(
        _("academic year"),
        max_length=9,
        db_index=True,
        help_text=_("Academic year in YYYY-YYYY form"),
    )
    school = models.CharField(_("school"), max_length=50, db_index=True)
    department = models.CharField(_("department"), max_length=100, db_index=True)

    class Meta:
        abstract = True

    @property
    def scope(self) -> tuple[str, str, str]:
        return self.academic_year, self.school, self.department
