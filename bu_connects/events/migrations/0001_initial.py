from django.db import migrations
from django.db import models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="CampusEvent",
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
                ("title", models.CharField(max_length=255)),
                ("location", models.CharField(blank=True, max_length=255)),
                ("event_date", models.DateField()),
                ("event_time", models.CharField(blank=True, max_length=50)),
                ("description", models.TextField(blank=True)),
                ("campus", models.CharField(db_index=True, max_length=100)),
            ],
            options={
                "ordering": ["event_date", "id"],
            },
        ),
    ]
