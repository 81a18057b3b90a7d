from django.contrib import admin

from .models import AcademicYear, Department, DepartmentConfig, School


class DepartmentInline(admin.TabularInline):
    model = Department
    extra = 0


@admin.register(School)
class SchoolAdmin(admin.ModelAdmin):
    list_display = ["code", "name"]
    search_fields = ["code", "name"]
    inlines = [DepartmentInline]


@admin.register(AcademicYear)
class AcademicYearAdmin(admin.ModelAdmin):
    list_display = ["year", "is_active"]
    list_filter = ["is_active"]


@admin.register(DepartmentConfig)
class DepartmentConfigAdmin(admin.ModelAdmin):
    list_display = ["academic_year", "school", "department", "min_panel_size", "max_panel_size"]
    list_filter = ["academic_year", "school"]
