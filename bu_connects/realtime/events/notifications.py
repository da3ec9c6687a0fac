from __future__ import annotations

from typing import TYPE_CHECKING
from typing import Any

if TYPE_CHECKING:  # import for type checking only
    from bu_connects.notifications.models import Notification
from bu_connects.realtime.socketio import emit_event_to_user


def build_notification_payload(notification: Notification) -> dict[str, Any]:
    actor = notification.actor
    return {
        "id": notification.id,
        "type": notification.notification_type,
        "message": notification.message,
        "actor_id": notification.actor_id,
        "actorName": actor.name,
        "actorPic": actor.profile_pic.name or None,
        "is_read": notification.is_read,
        "created_at": notification.created_at.isoformat(),
    }


def publish_notification_created(notification: Notification) -> None:
    """Publish a newly created Notification to the recipient in realtime."""

    payload = build_notification_payload(notification)
    emit_event_to_user(notification.user_id, "notification", payload)
