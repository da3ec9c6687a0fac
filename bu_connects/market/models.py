from django.db import models

from bu_connects.uploads import timestamped_upload_to


class MarketItem(models.Model):
    """Listing in the campus marketplace. There is no sold state."""

    name = models.CharField(max_length=255)
    price = models.DecimalField(max_digits=10, decimal_places=2)
    description = models.TextField(blank=True)
    seller = models.CharField(max_length=255)
    campus = models.CharField(max_length=100, blank=True)
    image = models.FileField(
        upload_to=timestamped_upload_to, blank=True, null=True, max_length=255
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at", "-id"]

    def __str__(self) -> str:  # pragma: no cover - simple repr
        return f"{self.name} ({self.seller})"
