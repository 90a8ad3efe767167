from rest_framework import serializers


class CategorySerializer(serializers.Serializer):
    id = serializers.CharField(read_only=True)
    name = serializers.CharField(max_length=255)
    description = serializers.CharField(
        required=False, allow_blank=True, allow_null=True)
    isActive = serializers.BooleanField(source='is_active', default=True)
    restaurantCount = serializers.IntegerField(
        source='restaurant_count', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    def validate_description(self, value):
        # Blank descriptions are stored as "no description"
        return value.strip() if value and value.strip() else None


def category_to_wire(category):
    return CategorySerializer(category).data
