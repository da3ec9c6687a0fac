from rest_framework import serializers

from bu_connects.chat.models import Message


class MessageSerializer(serializers.ModelSerializer):
    class Meta:
        model = Message
        fields = ("id", "sender", "receiver", "message", "created_at")
        read_only_fields = fields
