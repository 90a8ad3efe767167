from rest_framework import serializers


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField(
        required=True,
        error_messages={
            'invalid': 'Invalid email',
            'required': 'Email is required',
            'blank': 'Email is required',
        }
    )
    password = serializers.CharField(
        required=True,
        write_only=True,
        min_length=6,
        error_messages={
            'min_length': 'Minimum 6 characters',
            'required': 'Password is required',
            'blank': 'Password is required',
        }
    )
