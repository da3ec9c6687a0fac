from __future__ import annotations

from typing import TYPE_CHECKING
from typing import Any

if TYPE_CHECKING:  # import for type checking only
    from bu_connects.chat.models import Message


def build_chat_payload(message: Message, data: dict[str, Any]) -> dict[str, Any]:
    """Echo the submitted payload with the id the store assigned."""
    return {**data, "id": message.pk}


def chat_participants(message: Message) -> tuple[str, ...]:
    """Distinct participant identifiers of a message, sender first."""
    if message.sender == message.receiver:
        return (message.sender,)
    return (message.sender, message.receiver)
