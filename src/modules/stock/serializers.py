from rest_framework import serializers

from modules.stock.models import StockInbound


class RegisterInboundSerializer(serializers.Serializer):
    inbound_date = serializers.DateField()
    cantidad_llenas = serializers.IntegerField()
    notes = serializers.CharField(required=False, default="", allow_blank=True)


class StockInboundSerializer(serializers.ModelSerializer):
    class Meta:
        model = StockInbound
        fields = ["id", "inbound_date", "cantidad_llenas", "notes", "created_at"]
        read_only_fields = fields


class ReportQuerySerializer(serializers.Serializer):
    date = serializers.DateField(required=False)


class StockSummarySerializer(serializers.Serializer):
    date = serializers.DateField(allow_null=True)
    llenas_ingresadas = serializers.IntegerField()
    llenas_entregadas = serializers.IntegerField()
    vacias_recibidas = serializers.IntegerField()
    llenas_disponibles_estimadas = serializers.IntegerField()
    vacias_deposito_estimadas = serializers.IntegerField()
    pendientes_recuperar = serializers.IntegerField()


class DailyReportSerializer(serializers.Serializer):
    date = serializers.DateField()
    entregas_dia = serializers.IntegerField()
    llenas_entregadas = serializers.IntegerField()
    vacias_recibidas = serializers.IntegerField()
    pendiente = serializers.IntegerField()
