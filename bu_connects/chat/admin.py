from django.contrib import admin

from bu_connects.chat import models


@admin.register(models.Message)
class MessageAdmin(admin.ModelAdmin):
    list_display = ["id", "sender", "receiver", "created_at"]
    search_fields = ["sender", "receiver", "message"]
