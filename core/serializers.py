from rest_framework import serializers


class HealthCheckSerializer(serializers.Serializer):
    status = serializers.CharField()
    timestamp = serializers.DateTimeField()
    gateway = serializers.CharField()
    restaurants = serializers.IntegerField()
    categories = serializers.IntegerField()
    service = serializers.CharField()
    version = serializers.CharField()
