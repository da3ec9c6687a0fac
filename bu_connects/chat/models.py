from django.db import models


class Message(models.Model):
    """Direct message. Append-only; rows are never edited after insert.

    ``sender`` and ``receiver`` are the identifiers the clients use for each
    other and are deliberately not foreign keys.
    """

    sender = models.CharField(max_length=255, db_index=True)
    receiver = models.CharField(max_length=255, db_index=True)
    message = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["created_at", "id"]

    def __str__(self) -> str:  # pragma: no cover - simple repr
        return f"Message({self.sender}->{self.receiver})"
