import uuid
from typing import ClassVar

from django.contrib.auth.models import AbstractUser
from django.db.models import CharField
from django.db.models import EmailField
from django.db.models import UUIDField
from django.utils.translation import gettext_lazy as _

from .managers import UserManager


class User(AbstractUser):
    """
    Login account for admins and faculty.
    Uses email as the unique identifier instead of username.
    Uses UUID as primary key.

    Academic details (employee id, schools, specializations) live on the
    Faculty profile attached to the account.
    """

    id = UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    first_name = CharField(_("first name"), max_length=150)
    last_name = CharField(_("last name"), max_length=150, blank=True)
    email = EmailField(_("email address"), unique=True)
    username = None  # type: ignore[assignment]

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = ["first_name"]

    objects: ClassVar[UserManager] = UserManager()

    class Meta:
        verbose_name = _("user")
        verbose_name_plural = _("users")

    def __str__(self) -> str:
        return self.email

    def get_full_name(self) -> str:
        """Return first_name + last_name."""
        full_name = f"{self.first_name} {self.last_name}".strip()
        return full_name or self.email
