from rest_framework import serializers
from .models import Receipt


class ReceiptSerializer(serializers.ModelSerializer):
    item_count = serializers.IntegerField(read_only=True)

    class Meta:
        model = Receipt
        fields = ['id', 'customer_name', 'date', 'items', 'item_count', 'total', 'timestamp']
        read_only_fields = fields
