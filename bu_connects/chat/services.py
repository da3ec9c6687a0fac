from __future__ import annotations

from typing import Any

from django.db.models import Q
from django.db.models import QuerySet

from .models import Message


def persist_message(payload: dict[str, Any]) -> Message:
    """Store one chat submission and return the saved row."""
    return Message.objects.create(
        sender=str(payload["sender"]),
        receiver=str(payload["receiver"]),
        message=str(payload["message"]),
    )


def conversation(user1: str, user2: str) -> QuerySet[Message]:
    """Both directions of a conversation, oldest first."""
    return Message.objects.filter(
        Q(sender=user1, receiver=user2) | Q(sender=user2, receiver=user1)
    ).order_by("created_at", "id")
