from django.db import migrations
from django.db import models

import bu_connects.uploads


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="MarketItem",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("name", models.CharField(max_length=255)),
                ("price", models.DecimalField(decimal_places=2, max_digits=10)),
                ("description", models.TextField(blank=True)),
                ("seller", models.CharField(max_length=255)),
                ("campus", models.CharField(blank=True, max_length=100)),
                (
                    "image",
                    models.FileField(
                        blank=True,
                        max_length=255,
                        null=True,
                        upload_to=bu_connects.uploads.timestamped_upload_to,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "ordering": ["-created_at", "-id"],
            },
        ),
    ]
