import django.core.serializers.json
import uuid6
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="AuditEvent",
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
                ("actor_id", models.UUIDField(blank=True, null=True)),
                (
                    "entity",
                    models.CharField(
                        choices=[
                            ("order", "Pedido"),
                            ("delivery", "Entrega"),
                            ("delivery_failure", "Entrega fallida"),
                            ("stock_inbound", "Ingreso de stock"),
                        ],
                        max_length=50,
                    ),
                ),
                ("entity_id", models.UUIDField(blank=True, null=True)),
                (
                    "action",
                    models.CharField(
                        choices=[
                            ("created", "Creado"),
                            ("status_changed", "Cambio de estado"),
                            ("assigned", "Asignado"),
                        ],
                        max_length=50,
                    ),
                ),
                (
                    "details",
                    models.JSONField(
                        default=dict,
                        encoder=django.core.serializers.json.DjangoJSONEncoder,
                    ),
                ),
            ],
            options={
                "db_table": "audit_events",
                "ordering": ["created_at"],
                "indexes": [
                    models.Index(
                        fields=["entity", "entity_id"], name="audit_entity_idx"
                    )
                ],
            },
        ),
    ]
