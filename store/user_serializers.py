# store/user_serializers.py
from rest_framework import serializers

from .models import User


class UserSerializer(serializers.ModelSerializer):
    """Leitura: nunca expõe o hash da senha."""

    class Meta:
        model = User
        fields = ["id", "name", "email", "role", "created_at", "updated_at"]
        read_only_fields = fields


class UserCreateSerializer(serializers.ModelSerializer):
    name = serializers.CharField(min_length=3, max_length=255)
    password = serializers.CharField(min_length=6, write_only=True)

    class Meta:
        model = User
        fields = ["id", "name", "email", "password"]
        read_only_fields = ["id"]
        # unicidade fica com a constraint do banco
        extra_kwargs = {"email": {"validators": []}}

    def validate_email(self, value):
        return value.strip().lower()

    def create(self, validated_data):
        password = validated_data.pop("password")
        user = User(**validated_data)
        user.set_password(password)
        user.save()
        return user


class UserUpdateSerializer(UserCreateSerializer):
    """
    Sobrescreve nome e e-mail. Senha ausente preserva o hash atual;
    só é trocada quando enviada.
    """
    password = serializers.CharField(min_length=6, write_only=True, required=False)

    def update(self, instance, validated_data):
        password = validated_data.pop("password", None)
        instance.name = validated_data["name"]
        instance.email = validated_data["email"]
        if password:
            instance.set_password(password)
        instance.save()
        return instance


class SignInSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(min_length=6)
