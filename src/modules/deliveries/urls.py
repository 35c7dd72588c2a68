"""Delivery URL configuration."""

from django.urls import path

from modules.deliveries.views import RegisterDeliveryView, RegisterFailedDeliveryView

urlpatterns = [
    path("deliveries/", RegisterDeliveryView.as_view(), name="delivery-register"),
    path(
        "deliveries/failed/",
        RegisterFailedDeliveryView.as_view(),
        name="delivery-register-failed",
    ),
]
