from rest_framework import serializers
from .models import Review, MAX_COMMENT_LENGTH
from apps.accounts.serializers import UserPublicSerializer
from apps.businesses.models import Business


class BusinessMinimalSerializer(serializers.ModelSerializer):
    """Minimal business info for nested serialization."""

    class Meta:
        model = Business
        fields = ['id', 'name', 'address', 'category_id']
        read_only_fields = fields


class ReviewSerializer(serializers.ModelSerializer):
    """Main review serializer; author projected as id/username/email."""

    user = UserPublicSerializer(read_only=True)

    class Meta:
        model = Review
        fields = [
            'id',
            'business',
            'user',
            'rating',
            'comment',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class UserReviewSerializer(serializers.ModelSerializer):
    """Review as listed on a user's profile; business projected."""

    business = BusinessMinimalSerializer(read_only=True)

    class Meta:
        model = Review
        fields = [
            'id',
            'business',
            'user',
            'rating',
            'comment',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class ReviewCreateSerializer(serializers.Serializer):
    """Request body for review creation."""

    business_id = serializers.UUIDField()
    rating = serializers.IntegerField()
    comment = serializers.CharField(max_length=MAX_COMMENT_LENGTH)


class ReviewUpdateSerializer(serializers.Serializer):
    """Request body for review update; both fields optional."""

    rating = serializers.IntegerField(required=False)
    comment = serializers.CharField(max_length=MAX_COMMENT_LENGTH, required=False, allow_blank=True)
