from django.contrib import admin

from .models import FacultyRequest


@admin.register(FacultyRequest)
class FacultyRequestAdmin(admin.ModelAdmin):
    list_display = ["faculty", "project", "category", "review_name", "status", "created", "resolved_at"]
    list_filter = ["category", "status", "review_name"]
    search_fields = ["faculty__employee_id", "faculty__name", "project__name", "message"]
    raw_id_fields = ["faculty", "project", "student", "resolved_by"]
    readonly_fields = ["status", "resolved_by", "resolved_at"]
