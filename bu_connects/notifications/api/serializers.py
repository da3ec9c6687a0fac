from __future__ import annotations

from rest_framework import serializers

from bu_connects.notifications.models import Notification


class NotificationSerializer(serializers.ModelSerializer):
    """Read serializer; carries the actor's name and picture alongside the row."""

    user_id = serializers.IntegerField(read_only=True)
    actor_id = serializers.IntegerField(read_only=True)
    actorName = serializers.CharField(source="actor.name", read_only=True)  # noqa: N815
    actorPic = serializers.SerializerMethodField()  # noqa: N815

    class Meta:
        model = Notification
        fields = (
            "id",
            "user_id",
            "actor_id",
            "notification_type",
            "message",
            "is_read",
            "created_at",
            "actorName",
            "actorPic",
        )
        read_only_fields = fields

    def get_actorPic(self, obj: Notification) -> str | None:  # noqa: N802
        return obj.actor.profile_pic.name or None
