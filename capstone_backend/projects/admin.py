from django.contrib import admin

from .models import Project


@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    list_display = [
        "name",
        "academic_year",
        "school",
        "department",
        "guide_faculty",
        "panel",
        "status",
        "best_project",
    ]
    list_filter = ["academic_year", "school", "department", "status", "best_project"]
    search_fields = ["name", "guide_faculty__name", "guide_faculty__employee_id"]
    raw_id_fields = ["guide_faculty", "panel"]
    filter_horizontal = ["students"]
    readonly_fields = ["status", "completed_at"]
