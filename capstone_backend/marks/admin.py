from django.contrib import admin

from .models import MarkingSchema, Marks, ReviewFeedback


@admin.register(MarkingSchema)
class MarkingSchemaAdmin(admin.ModelAdmin):
    list_display = ["academic_year", "school", "department", "modified"]
    list_filter = ["academic_year", "school", "department"]


@admin.register(Marks)
class MarksAdmin(admin.ModelAdmin):
    list_display = [
        "student",
        "project",
        "faculty",
        "review_name",
        "faculty_type",
        "total_marks",
        "max_total_marks",
        "attendance",
        "pat",
    ]
    list_filter = ["review_name", "faculty_type", "attendance", "pat", "is_submitted"]
    search_fields = ["student__reg_no", "student__name", "faculty__employee_id"]
    raw_id_fields = ["student", "project", "faculty"]


@admin.register(ReviewFeedback)
class ReviewFeedbackAdmin(admin.ModelAdmin):
    list_display = ["project", "faculty", "review_name", "ppt_approved"]
    list_filter = ["review_name", "ppt_approved"]
    raw_id_fields = ["project", "faculty"]
