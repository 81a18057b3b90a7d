from django.contrib import admin

from .models import Panel, PanelMember


class PanelMemberInline(admin.TabularInline):
    model = PanelMember
    extra = 0
    ordering = ["position"]


@admin.register(Panel)
class PanelAdmin(admin.ModelAdmin):
    list_display = [
        "panel_name",
        "academic_year",
        "school",
        "department",
        "assigned_projects_count",
        "max_projects",
        "is_active",
    ]
    list_filter = ["academic_year", "school", "department", "panel_type", "is_active"]
    search_fields = ["panel_name", "venue"]
    readonly_fields = ["assigned_projects_count"]
    inlines = [PanelMemberInline]
