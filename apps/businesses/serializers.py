from rest_framework import serializers
from .models import Business, Category
from apps.accounts.serializers import UserPublicSerializer
from apps.reviews.models import Review


class BusinessReviewSerializer(serializers.ModelSerializer):
    """Review as embedded in a business detail response."""

    user = UserPublicSerializer(read_only=True)

    class Meta:
        model = Review
        fields = ['id', 'business', 'user', 'rating', 'comment', 'created_at', 'updated_at']
        read_only_fields = fields


class BusinessSerializer(serializers.ModelSerializer):
    """Main business serializer with its rating summary."""

    owner_id = serializers.UUIDField(read_only=True, allow_null=True)
    average_rating = serializers.FloatField(read_only=True, default=0)
    review_count = serializers.IntegerField(read_only=True, default=0)

    class Meta:
        model = Business
        fields = [
            'id',
            'name',
            'description',
            'address',
            'phone',
            'website',
            'category_id',
            'owner_id',
            'google_map_url',
            'photos',
            'average_rating',
            'review_count',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class BusinessDetailSerializer(BusinessSerializer):
    """Business with its reviews attached."""

    reviews = BusinessReviewSerializer(source='reviews_list', many=True, read_only=True)

    class Meta(BusinessSerializer.Meta):
        fields = BusinessSerializer.Meta.fields + ['reviews']
        read_only_fields = fields


class BusinessWriteSerializer(serializers.Serializer):
    """
    Request body for create and update.

    Used with ``partial=True`` for updates so absent fields stay untouched.
    """

    name = serializers.CharField(max_length=120)
    description = serializers.CharField(max_length=1000, required=False, allow_blank=True)
    address = serializers.CharField(max_length=200)
    phone = serializers.CharField(max_length=50, required=False, allow_blank=True)
    website = serializers.CharField(max_length=300, required=False, allow_blank=True)
    category_id = serializers.ChoiceField(choices=Category.choices)
    google_map_url = serializers.URLField(max_length=500, required=False, allow_blank=True)
    photos = serializers.ListField(child=serializers.CharField(max_length=500), required=False)


class BusinessListQuerySerializer(serializers.Serializer):
    """Query parameters for the business list."""

    page = serializers.IntegerField(required=False, default=1)
    limit = serializers.IntegerField(required=False, default=10)
    owner = serializers.UUIDField(required=False)


class PaginationSerializer(serializers.Serializer):
    page = serializers.IntegerField()
    limit = serializers.IntegerField()
    total = serializers.IntegerField()
    totalPages = serializers.IntegerField()
    hasNext = serializers.BooleanField()
    hasPrev = serializers.BooleanField()


class BusinessListResponseSerializer(serializers.Serializer):
    businesses = BusinessSerializer(many=True)
    pagination = PaginationSerializer()


class CategorySerializer(serializers.Serializer):
    id = serializers.CharField()
    name = serializers.CharField()
