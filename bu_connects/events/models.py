from django.db import models


class CampusEvent(models.Model):
    title = models.CharField(max_length=255)
    location = models.CharField(max_length=255, blank=True)
    event_date = models.DateField()
    # Free text as entered, e.g. "6:30 PM".
    event_time = models.CharField(max_length=50, blank=True)
    description = models.TextField(blank=True)
    campus = models.CharField(max_length=100, db_index=True)

    class Meta:
        ordering = ["event_date", "id"]

    def __str__(self) -> str:  # pragma: no cover - simple repr
        return f"{self.title} @ {self.campus} on {self.event_date}"

    @property
    def month_label(self) -> str:
        """Abbreviated month name, e.g. ``Mar``."""
        return self.event_date.strftime("%b")

    @property
    def day_label(self) -> str:
        """Zero-padded day of month, e.g. ``07``."""
        return self.event_date.strftime("%d")
