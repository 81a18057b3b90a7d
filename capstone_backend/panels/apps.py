from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class PanelsConfig(AppConfig):
    name = "capstone_backend.panels"
    verbose_name = _("Review panels")
