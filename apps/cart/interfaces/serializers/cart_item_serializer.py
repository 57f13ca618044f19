"""
Cart item serializers.
"""
from rest_framework import serializers

from apps.cart.domain.entities import CartItem


class CartItemSerializer(serializers.Serializer):
    """Serializer for cart item output."""
    id = serializers.CharField(source='get_id', read_only=True)
    data = serializers.SerializerMethodField()
    total_page_price = serializers.FloatField(source='get_total_page_price', read_only=True)
    single_price = serializers.FloatField(source='get_single_price', read_only=True)
    single_price_excluding_tax = serializers.FloatField(
        source='get_single_price_excluding_tax', read_only=True
    )
    single_tax = serializers.FloatField(source='get_single_tax', read_only=True)
    total_price = serializers.FloatField(source='get_total_price', read_only=True)
    total_price_excluding_tax = serializers.FloatField(
        source='get_total_price_excluding_tax', read_only=True
    )
    total_tax = serializers.FloatField(source='get_total_tax', read_only=True)

    def get_data(self, obj: CartItem) -> dict:
        return obj.to_array()['data']


class CartItemInputSerializer(serializers.Serializer):
    """Serializer for building a cart item from a request payload."""
    companyDesignId = serializers.IntegerField(required=False, allow_null=True)
    pitchPrintProjectId = serializers.IntegerField(required=False, allow_null=True)
    name = serializers.CharField(max_length=255, required=False, allow_blank=True)
    sku = serializers.CharField(max_length=100, required=False, allow_blank=True)
    quantity = serializers.IntegerField(min_value=1, required=False)
    price = serializers.FloatField(min_value=0, required=False)
    colorPrice = serializers.FloatField(min_value=0, required=False)
    pagePrice = serializers.FloatField(min_value=0, required=False)
    tax = serializers.FloatField(min_value=0, required=False)
    colorId = serializers.IntegerField(required=False, allow_null=True)
    numEditPage = serializers.IntegerField(min_value=0, required=False)
    designAttributies = serializers.ListField(child=serializers.JSONField(), required=False)
    variantEntities = serializers.ListField(child=serializers.JSONField(), required=False)
    variant = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    thumbnail = serializers.CharField(required=False, allow_blank=True)

    def create(self, validated_data) -> CartItem:
        """Create the item, routing every field through the domain checks."""
        item = CartItem()
        for key, value in validated_data.items():
            item.set(key, value)
        return item
