from rest_framework import serializers


class AssignOrdersSerializer(serializers.Serializer):
    # An empty list is reported by the dispatch service itself.
    order_ids = serializers.ListField(child=serializers.UUIDField(), allow_empty=True)
    driver_id = serializers.UUIDField()
