from django.contrib import admin

from bu_connects.market import models


@admin.register(models.MarketItem)
class MarketItemAdmin(admin.ModelAdmin):
    list_display = ["id", "name", "price", "seller", "campus", "created_at"]
    search_fields = ["name", "description", "seller"]
    list_filter = ["campus"]
