import django.db.models.deletion
import uuid6
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("orders", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Delivery",
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
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("llenas_entregadas", models.PositiveIntegerField()),
                ("vacias_recibidas", models.PositiveIntegerField()),
                ("notes", models.TextField(blank=True, default="")),
                (
                    "order",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="deliveries",
                        to="orders.order",
                    ),
                ),
            ],
            options={
                "db_table": "deliveries",
                "ordering": ["created_at"],
                "indexes": [
                    models.Index(
                        fields=["created_at"], name="deliveries_created_idx"
                    )
                ],
            },
        ),
        migrations.CreateModel(
            name="FailedDelivery",
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
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("reason", models.TextField()),
                ("reprogram_date", models.DateField(blank=True, null=True)),
                (
                    "reprogram_time_slot",
                    models.CharField(blank=True, max_length=50, null=True),
                ),
                (
                    "order",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="failed_deliveries",
                        to="orders.order",
                    ),
                ),
            ],
            options={
                "db_table": "failed_deliveries",
                "ordering": ["created_at"],
            },
        ),
    ]
