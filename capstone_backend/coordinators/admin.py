from django.contrib import admin

from .models import ProjectCoordinator


@admin.register(ProjectCoordinator)
class ProjectCoordinatorAdmin(admin.ModelAdmin):
    list_display = ["faculty", "academic_year", "school", "department", "is_primary", "is_active"]
    list_filter = ["academic_year", "school", "department", "is_primary", "is_active"]
    search_fields = ["faculty__employee_id", "faculty__name"]
    raw_id_fields = ["faculty"]
