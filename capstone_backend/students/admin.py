from django.contrib import admin

from .models import Student


@admin.register(Student)
class StudentAdmin(admin.ModelAdmin):
    list_display = ["reg_no", "name", "academic_year", "school", "department", "pat", "is_active"]
    list_filter = ["academic_year", "school", "department", "pat"]
    search_fields = ["reg_no", "name", "email_id"]
    ordering = ["reg_no"]
