from django.contrib import admin

from bu_connects.notifications import models


@admin.register(models.Notification)
class NotificationAdmin(admin.ModelAdmin):
    list_display = ["id", "user", "actor", "notification_type", "is_read"]
    search_fields = ["message", "notification_type"]
    list_filter = ["notification_type", "is_read", "created_at"]
