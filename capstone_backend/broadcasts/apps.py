from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class BroadcastsConfig(AppConfig):
    name = "capstone_backend.broadcasts"
    verbose_name = _("Broadcasts")
