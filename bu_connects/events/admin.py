from django.contrib import admin

from bu_connects.events import models


@admin.register(models.CampusEvent)
class CampusEventAdmin(admin.ModelAdmin):
    list_display = ["id", "title", "campus", "event_date", "event_time"]
    search_fields = ["title", "location", "description"]
    list_filter = ["campus", "event_date"]
