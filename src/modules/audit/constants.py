"""Entity and action names written to the audit trail."""

from django.db import models


class AuditEntity(models.TextChoices):
    ORDER = "order", "Pedido"
    DELIVERY = "delivery", "Entrega"
    DELIVERY_FAILURE = "delivery_failure", "Entrega fallida"
    STOCK_INBOUND = "stock_inbound", "Ingreso de stock"


class AuditAction(models.TextChoices):
    CREATED = "created", "Creado"
    STATUS_CHANGED = "status_changed", "Cambio de estado"
    ASSIGNED = "assigned", "Asignado"
