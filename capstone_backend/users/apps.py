from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class UsersConfig(AppConfig):
    name = "capstone_backend.users"
    verbose_name = _("Users")
