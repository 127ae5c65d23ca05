from rest_framework import serializers

from .models import Category, Product
from .services import resolve_or_create_category


class CategorySerializer(serializers.ModelSerializer):
    """Serializer for Category model"""

    product_count = serializers.SerializerMethodField()

    class Meta:
        model = Category
        fields = [
            'id',
            'name',
            'description',
            'product_count',
        ]
        read_only_fields = ['id']

    def get_product_count(self, obj):
        return obj.products.count()

    def validate_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError('Category name is required')
        return value


class ProductSerializer(serializers.ModelSerializer):
    """
    Product serializer.

    Either ``category`` (an id) or ``new_category`` (a name, resolved or
    created) must be given on create. On update, ``new_category`` moves the
    product. ``category_name`` is always the snapshot taken on write.
    """

    new_category = serializers.CharField(write_only=True, required=False, allow_blank=True)

    class Meta:
        model = Product
        fields = [
            'id',
            'name',
            'price',
            'quantity',
            'category',
            'category_name',
            'new_category',
        ]
        read_only_fields = ['id', 'category_name']
        extra_kwargs = {'category': {'required': False}}

    def validate(self, data):
        new_category = (data.pop('new_category', '') or '').strip()
        if not data.get('category'):
            if new_category:
                data['category'], _ = resolve_or_create_category(new_category)
            elif self.instance is None:
                raise serializers.ValidationError({
                    'category': 'Select a category or give a new category name'
                })
        return data

    def create(self, validated_data):
        validated_data['category_name'] = validated_data['category'].name
        return super().create(validated_data)

    def update(self, instance, validated_data):
        # Moving a product to another category takes a fresh snapshot
        if 'category' in validated_data:
            validated_data['category_name'] = validated_data['category'].name
        return super().update(instance, validated_data)
