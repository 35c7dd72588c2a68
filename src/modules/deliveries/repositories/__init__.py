"""Delivery repositories package."""

from modules.deliveries.repositories.django_repository import DeliveryDjangoRepository
from modules.deliveries.repositories.interfaces import IDeliveryRepository

__all__ = ["DeliveryDjangoRepository", "IDeliveryRepository"]
