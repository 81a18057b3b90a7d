from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class MarksConfig(AppConfig):
    name = "capstone_backend.marks"
    verbose_name = _("Marks")
