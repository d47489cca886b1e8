#backend/users/serializers.py
from rest_framework import serializers
from .models import User


class UserSerializer(serializers.ModelSerializer):
    """Serializer for User model (read)."""
    full_name = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = [
            'id', 'email',
            'first_name', 'last_name', 'full_name', 'role',
            'phone', 'is_active', 'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'role', 'created_at', 'updated_at', 'full_name']

    def get_full_name(self, obj):
        return obj.get_full_name()


class UserSummarySerializer(serializers.ModelSerializer):
    """Compact user payload embedded in section/meeting responses."""
    name = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = ['id', 'name', 'email']

    def get_name(self, obj):
        return obj.get_full_name()
