"""Account constants: the two roles GasFlow knows about."""

from django.db import models


class Role(models.TextChoices):
    ADMIN = "ADMIN", "Administrador"
    DRIVER = "DRIVER", "Repartidor"
