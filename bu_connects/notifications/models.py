from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _


class Notification(models.Model):
    class Type(models.TextChoices):
        LIKE = "like", _("Like")
        COMMENT = "comment", _("Comment")
        MESSAGE = "message", _("Message")
        OTHER = "other", _("Other")

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="notifications"
    )
    actor = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="triggered_notifications",
    )
    notification_type = models.CharField(
        max_length=20, choices=Type.choices, default=Type.OTHER
    )
    message = models.CharField(max_length=255, blank=True, default="")
    # Flipped to True in bulk per recipient; never reset.
    is_read = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return f"{self.notification_type} for {self.user_id} by {self.actor_id}"
