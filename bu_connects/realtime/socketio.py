"""Global Socket.IO server for the frontend.

Chat and notifications share this one server instance.

Frontend convention:
- URL base: ws://<host>:<PORT>
- Socket.IO path: /socket.io/ (the client default)
- Identity: optional `query.userId` (or `auth.userId`); it only selects the
  per-user room, it is not an authentication scheme.

Events:
- inbound  `send_message`    {sender, receiver, message}
- outbound `receive_message` {sender, receiver, message, id}
- outbound `notification`    see realtime.events.notifications
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import parse_qs

import socketio
from asgiref.sync import async_to_sync
from channels.db import database_sync_to_async
from django.conf import settings

from bu_connects.chat.services import persist_message
from bu_connects.realtime.events.chat import build_chat_payload
from bu_connects.realtime.events.chat import chat_participants

logger = logging.getLogger(__name__)

FANOUT_ALL = "all"
FANOUT_PARTICIPANTS = "participants"


def _client_manager() -> socketio.AsyncManager | None:
    # Redis lets every server process reach its own sockets on broadcast.
    if settings.REDIS_URL:
        return socketio.AsyncRedisManager(settings.REDIS_URL)
    return None


sio = socketio.AsyncServer(
    async_mode="asgi",
    cors_allowed_origins=[settings.ALLOWED_ORIGIN],
    client_manager=_client_manager(),
    # One event at a time per client: a message is stored and broadcast
    # before the same client's next message is looked at.
    async_handlers=False,
    logger=False,
    engineio_logger=False,
)


def room_for_user(user_id: Any) -> str:
    return f"user_{str(user_id).strip()}"


def _extract_user_id(environ: dict[str, Any], auth: Any | None) -> str | None:
    """Extract the optional user id from Socket.IO environ/auth.

    Handles python-socketio environ shapes across ASGI/WSGI servers.
    """

    scope: Any = environ
    if isinstance(environ, dict) and "asgi.scope" in environ:
        inner = environ.get("asgi.scope")
        if isinstance(inner, dict):
            scope = inner

    query_string: str | bytes = ""
    if isinstance(scope, dict) and "query_string" in scope:
        query_string = scope.get("query_string", b"")
    elif isinstance(scope, dict) and "QUERY_STRING" in scope:
        query_string = scope.get("QUERY_STRING", "")

    if isinstance(query_string, (bytes, bytearray)):
        query_string = query_string.decode(errors="ignore")

    user_id = parse_qs(str(query_string)).get("userId", [None])[0]
    if isinstance(user_id, str) and user_id.strip():
        return user_id.strip()

    # Allow `auth: { userId }` as fallback.
    if isinstance(auth, dict):
        auth_user_id = auth.get("userId")
        if auth_user_id not in (None, ""):
            return str(auth_user_id).strip()

    return None


@sio.event
async def connect(sid: str, environ: dict[str, Any], auth: Any | None = None):
    user_id = _extract_user_id(environ, auth)
    await sio.save_session(sid, {"user_id": user_id})
    if user_id is not None:
        await sio.enter_room(sid, room_for_user(user_id))
    logger.info("User Connected: %s (user %s)", sid, user_id)


@sio.event
async def disconnect(sid: str, reason: Any = None):
    # Rooms/session are cleaned up automatically.
    logger.info("User Disconnected: %s (%s)", sid, reason)


@sio.event
async def send_message(sid: str, data: Any):
    """Persist a chat message, then fan it out.

    A message that cannot be stored is logged and dropped: nothing is
    broadcast and the sender gets no error event.
    """

    if not isinstance(data, dict):
        logger.warning("Dropped malformed chat payload from %s: %r", sid, data)
        return

    try:
        message = await database_sync_to_async(persist_message)(data)
    except Exception:
        logger.exception("Socket DB Error: chat message from %s dropped", sid)
        return

    payload = build_chat_payload(message, data)
    if settings.CHAT_FANOUT == FANOUT_PARTICIPANTS:
        rooms = [room_for_user(p) for p in chat_participants(message)]
        await sio.emit("receive_message", payload, to=rooms)
    else:
        await sio.emit("receive_message", payload)


def emit_event_to_room(room: str, event: str, payload: dict[str, Any]) -> None:
    """Emit an event to a room from sync Django code."""

    async_to_sync(sio.emit)(event, payload, room=room)


def emit_event_to_user(user_id: Any, event: str, payload: dict[str, Any]) -> None:
    emit_event_to_room(room_for_user(user_id), event, payload)
