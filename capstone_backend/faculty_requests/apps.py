from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class FacultyRequestsConfig(AppConfig):
    name = "capstone_backend.faculty_requests"
    verbose_name = _("Faculty requests")
