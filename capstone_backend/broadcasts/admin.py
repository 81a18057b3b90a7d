from django.contrib import admin

from .models import BroadcastMessage


@admin.register(BroadcastMessage)
class BroadcastMessageAdmin(admin.ModelAdmin):
    list_display = ["__str__", "action", "priority", "is_active", "expires_at", "created_by_name"]
    list_filter = ["action", "priority", "is_active"]
    search_fields = ["title", "message", "created_by_name"]
    raw_id_fields = ["created_by"]
