from decimal import Decimal

from rest_framework import serializers

from .models import STATUS_ACTIVE, STATUS_CHOICES


class RestaurantSerializer(serializers.Serializer):
    """Restaurant as it travels over the wire.

    Field names are camelCase and money-like decimals are sent as strings
    ("5.00") so no float rounding creeps in. Validated data comes back with
    the snake_case attribute names of the Restaurant dataclass.
    """
    id = serializers.CharField(read_only=True)
    name = serializers.CharField(max_length=255)
    cuisine = serializers.CharField(max_length=100)
    ownerName = serializers.CharField(source='owner_name', max_length=255)
    phone = serializers.CharField(max_length=20)
    email = serializers.EmailField()
    address = serializers.CharField()
    city = serializers.CharField(max_length=100)
    state = serializers.CharField(max_length=100)
    status = serializers.ChoiceField(
        choices=STATUS_CHOICES, default=STATUS_ACTIVE)
    commissionRate = serializers.DecimalField(
        source='commission_rate',
        max_digits=5,
        decimal_places=2,
        min_value=Decimal('0'),
        max_value=Decimal('100'),
        default=Decimal('5.00')
    )
    revenue = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=Decimal('0'),
        default=Decimal('0.00')
    )
    joinedDate = serializers.DateTimeField(source='joined_date', read_only=True)
    imageUrl = serializers.CharField(
        source='image_url', required=False, allow_blank=True, allow_null=True)

    def validate_phone(self, value):
        digits = [c for c in value if c.isdigit()]
        if len(digits) < 7:
            raise serializers.ValidationError(
                "Phone number must contain at least 7 digits")
        return value

    def validate_imageUrl(self, value):
        return value or None


def restaurant_to_wire(restaurant):
    """JSON-ready dict for a Restaurant or a validated-data dict"""
    return RestaurantSerializer(restaurant).data
