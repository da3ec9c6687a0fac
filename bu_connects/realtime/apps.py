from django.apps import AppConfig


class RealtimeConfig(AppConfig):
    name = "bu_connects.realtime"
    verbose_name = "Realtime"
