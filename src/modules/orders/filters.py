"""Query-string filters for the order listing.

Parsed with django-filter and handed to ``OrderService.list_orders`` as
an ``OrderListFilterDTO``; the service decides which assignee a driver
may actually see.
"""

import django_filters

from modules.orders.constants import OrderStatus
from modules.orders.dtos import OrderListFilterDTO
from modules.orders.models import Order


class OrderFilter(django_filters.FilterSet):
    date = django_filters.DateFilter(field_name="scheduled_date")
    status = django_filters.ChoiceFilter(
        field_name="status", choices=OrderStatus.choices
    )
    assignee = django_filters.UUIDFilter(field_name="assignee_id")

    class Meta:
        model = Order
        fields = ["date", "status", "assignee"]

    def to_dto(self) -> OrderListFilterDTO:
        """Build the service filter from already-validated query params."""
        data = self.form.cleaned_data
        return OrderListFilterDTO(
            scheduled_date=data.get("date"),
            status=data.get("status") or None,
            assignee_id=data.get("assignee"),
        )
