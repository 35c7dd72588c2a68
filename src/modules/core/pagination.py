"""Standard page-number pagination for list endpoints.

Response body::

    {"count": 42, "total_pages": 3, "page": 1, "page_size": 20,
     "next": "...", "previous": null, "results": [...]}

A non-integer or non-positive ``page``, or a ``page_size`` outside
``1..MAX_PAGE_SIZE``, is rejected with a 400 instead of being clamped.
"""

from __future__ import annotations

from django.conf import settings
from rest_framework.exceptions import ValidationError
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


class StandardResultsSetPagination(PageNumberPagination):
    page_size = settings.REST_FRAMEWORK.get("PAGE_SIZE", 20)
    page_size_query_param = "page_size"
    max_page_size = settings.MAX_PAGE_SIZE

    def get_page_size(self, request) -> int:
        raw = request.query_params.get(self.page_size_query_param)
        if raw is None:
            return self.page_size
        size = _parse_positive_int(raw, self.page_size_query_param)
        if size > self.max_page_size:
            raise ValidationError(
                {
                    self.page_size_query_param: (
                        f"page_size must be between 1 and {self.max_page_size}."
                    )
                }
            )
        return size

    def paginate_queryset(self, queryset, request, view=None):
        raw_page = request.query_params.get(self.page_query_param)
        if raw_page is not None:
            _parse_positive_int(raw_page, self.page_query_param)
        return super().paginate_queryset(queryset, request, view)

    def get_paginated_response(self, data) -> Response:
        return Response(
            {
                "count": self.page.paginator.count,
                "total_pages": self.page.paginator.num_pages,
                "page": self.page.number,
                "page_size": self.page.paginator.per_page,
                "next": self.get_next_link(),
                "previous": self.get_previous_link(),
                "results": data,
            }
        )

    def get_paginated_response_schema(self, schema: dict) -> dict:
        response_schema = super().get_paginated_response_schema(schema)
        response_schema["properties"]["total_pages"] = {"type": "integer"}
        response_schema["properties"]["page"] = {"type": "integer"}
        response_schema["properties"]["page_size"] = {"type": "integer"}
        return response_schema


def _parse_positive_int(raw: str, field: str) -> int:
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise ValidationError({field: f"{field} must be an integer."})
    if value < 1:
        raise ValidationError({field: f"{field} must be greater than or equal to 1."})
    return value
