from rest_framework import serializers

from bu_connects.events.models import CampusEvent


class CampusEventSerializer(serializers.ModelSerializer):
    month = serializers.CharField(source="month_label", read_only=True)
    day = serializers.CharField(source="day_label", read_only=True)

    class Meta:
        model = CampusEvent
        fields = (
            "id",
            "title",
            "location",
            "event_date",
            "event_time",
            "description",
            "campus",
            "month",
            "day",
        )
        read_only_fields = ("id",)
        extra_kwargs = {
            "location": {"required": False},
            "event_time": {"required": False},
            "description": {"required": False},
        }
