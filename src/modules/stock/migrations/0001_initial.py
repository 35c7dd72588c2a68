import django.core.validators
import uuid6
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="StockInbound",
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
                ("inbound_date", models.DateField()),
                (
                    "cantidad_llenas",
                    models.PositiveIntegerField(
                        validators=[django.core.validators.MinValueValidator(1)]
                    ),
                ),
                ("notes", models.TextField(blank=True, default="")),
            ],
            options={
                "db_table": "stock_inbounds",
                "ordering": ["inbound_date", "created_at"],
                "indexes": [
                    models.Index(
                        fields=["inbound_date"], name="stock_inbound_date_idx"
                    )
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(cantidad_llenas__gte=1),
                        name="stock_inbounds_quantity_positive",
                    )
                ],
            },
        ),
    ]
