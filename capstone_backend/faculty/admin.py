from django.contrib import admin

from .models import Faculty


@admin.register(Faculty)
class FacultyAdmin(admin.ModelAdmin):
    list_display = ["employee_id", "name", "email_id", "role", "is_active"]
    list_filter = ["role", "is_active"]
    search_fields = ["employee_id", "name", "email_id"]
    ordering = ["employee_id"]
