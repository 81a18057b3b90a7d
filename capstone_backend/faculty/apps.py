from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class FacultyConfig(AppConfig):
    name = "capstone_backend.faculty"
    verbose_name = _("Faculty")
