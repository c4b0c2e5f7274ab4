import uuid6
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Shipment",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid6.uuid7,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("route", models.TextField()),
                ("price", models.DecimalField(decimal_places=2, max_digits=14)),
                (
                    "status",
                    models.CharField(
                        choices=[("CREATED", "Created")],
                        default="CREATED",
                        max_length=20,
                    ),
                ),
                ("customer_id", models.UUIDField(db_index=True)),
            ],
            options={
                "db_table": "shipments",
                "ordering": ["-created_at"],
            },
        ),
    ]
