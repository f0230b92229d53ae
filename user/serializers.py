from django.contrib.auth import get_user_model
from rest_framework import serializers


class UserSerializer(serializers.ModelSerializer):
    """Public representation of an account."""

    class Meta:
        model = get_user_model()
        fields = ("id", "name", "email", "role", "phone")
        read_only_fields = fields


class SignupSerializer(serializers.ModelSerializer):
    """Serializer for account creation."""

    password = serializers.CharField(write_only=True, min_length=6)
    name = serializers.CharField(min_length=2, max_length=255)
    phone = serializers.CharField(
        min_length=10, max_length=15, required=False, allow_null=True
    )

    class Meta:
        model = get_user_model()
        fields = ("id", "name", "email", "password", "role", "phone")
        read_only_fields = ("id",)
        extra_kwargs = {
            # uniqueness is reported as EMAIL_ALREADY_EXISTS by the view
            "email": {"validators": []},
        }

    def create(self, validated_data):
        return get_user_model().objects.create_user(**validated_data)


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(min_length=6, write_only=True)
