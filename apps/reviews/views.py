from rest_framework import viewsets, status, serializers as drf_serializers
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticatedOrReadOnly
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema
from .serializers import (
    ReviewSerializer,
    UserReviewSerializer,
    ReviewCreateSerializer,
    ReviewUpdateSerializer,
)
from .services import (
    create_review,
    get_review_by_id,
    get_business_reviews,
    get_user_reviews,
    update_review,
    delete_review,
)
from apps.businesses.views import UUID_PATTERN


class MessageResponseSerializer(drf_serializers.Serializer):
    message = drf_serializers.CharField()


class ReviewViewSet(viewsets.ViewSet):
    """
    ViewSet for Review operations.

    create: Create a review (auth required)
    update / partial_update: Edit rating and/or comment (author only)
    destroy: Delete a review (author only)
    business: All reviews of a business, newest first
    user: All reviews written by a user, newest first
    """

    permission_classes = [IsAuthenticatedOrReadOnly]
    lookup_value_regex = UUID_PATTERN

    @extend_schema(
        request=ReviewCreateSerializer,
        responses={
            201: ReviewSerializer,
            400: MessageResponseSerializer,
            401: MessageResponseSerializer,
            404: MessageResponseSerializer,
        },
        tags=['reviews'],
    )
    def create(self, request):
        """Create review using service layer."""
        serializer = ReviewCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        review = create_review(
            author=request.user,
            business_id=serializer.validated_data['business_id'],
            rating=serializer.validated_data['rating'],
            comment=serializer.validated_data['comment'],
        )

        return Response(ReviewSerializer(review).data, status=status.HTTP_201_CREATED)

    @extend_schema(responses={200: ReviewSerializer, 404: MessageResponseSerializer}, tags=['reviews'])
    def retrieve(self, request, pk=None):
        """Get a single review."""
        return Response(ReviewSerializer(get_review_by_id(review_id=pk)).data)

    @extend_schema(
        request=ReviewUpdateSerializer,
        responses={
            200: ReviewSerializer,
            400: MessageResponseSerializer,
            403: MessageResponseSerializer,
            404: MessageResponseSerializer,
        },
        tags=['reviews'],
    )
    def update(self, request, pk=None):
        """Update review using service layer."""
        serializer = ReviewUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        review = update_review(
            review_id=pk,
            user=request.user,
            rating=serializer.validated_data.get('rating'),
            comment=serializer.validated_data.get('comment'),
        )

        return Response(ReviewSerializer(review).data)

    def partial_update(self, request, pk=None):
        return self.update(request, pk=pk)

    @extend_schema(
        responses={
            200: MessageResponseSerializer,
            403: MessageResponseSerializer,
            404: MessageResponseSerializer,
        },
        tags=['reviews'],
    )
    def destroy(self, request, pk=None):
        """Delete review using service layer."""
        delete_review(review_id=pk, user=request.user)
        return Response({'message': 'Review deleted'})

    @extend_schema(responses={200: ReviewSerializer(many=True)}, tags=['reviews'])
    @action(detail=False, methods=['get'], url_path=rf'business/(?P<business_id>{UUID_PATTERN})')
    def business(self, request, business_id=None):
        """Get all reviews for a business."""
        reviews = get_business_reviews(business_id=business_id)
        return Response(ReviewSerializer(reviews, many=True).data)

    @extend_schema(responses={200: UserReviewSerializer(many=True)}, tags=['reviews'])
    @action(detail=False, methods=['get'], url_path=rf'user/(?P<user_id>{UUID_PATTERN})')
    def user(self, request, user_id=None):
        """Get all reviews written by a user."""
        reviews = get_user_reviews(user_id=user_id)
        return Response(UserReviewSerializer(reviews, many=True).data)
