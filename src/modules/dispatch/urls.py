"""Dispatch URL configuration."""

from django.urls import path

from modules.dispatch.views import AssignOrdersView

urlpatterns = [
    path("dispatch/assign/", AssignOrdersView.as_view(), name="dispatch-assign"),
]
