from django.apps import AppConfig


class MarketConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "bu_connects.market"
    verbose_name = "Marketplace"
