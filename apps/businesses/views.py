from rest_framework import viewsets, status, serializers as drf_serializers
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticatedOrReadOnly
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from .models import Category
from .serializers import (
    BusinessSerializer,
    BusinessDetailSerializer,
    BusinessWriteSerializer,
    BusinessListQuerySerializer,
    BusinessListResponseSerializer,
    CategorySerializer,
)
from .services import (
    list_businesses,
    get_business,
    create_business,
    update_business,
    delete_business,
)

UUID_PATTERN = r'[0-9a-fA-F]{8}-?[0-9a-fA-F]{4}-?[0-9a-fA-F]{4}-?[0-9a-fA-F]{4}-?[0-9a-fA-F]{12}'


class MessageResponseSerializer(drf_serializers.Serializer):
    message = drf_serializers.CharField()


class BusinessViewSet(viewsets.ViewSet):
    """
    ViewSet for Business operations.

    list: Get a page of businesses with rating summaries
    retrieve: Get a business with its reviews and rating summary
    create: Create a business owned by the caller
    update / partial_update: Edit a business (owner only, claim if unowned)
    destroy: Delete a business and its reviews (owner only, claim if unowned)
    """

    permission_classes = [IsAuthenticatedOrReadOnly]
    lookup_value_regex = UUID_PATTERN

    @extend_schema(
        parameters=[
            OpenApiParameter('page', OpenApiTypes.INT, description='Page number (>= 1)', default=1),
            OpenApiParameter('limit', OpenApiTypes.INT, description='Page size (1-100)', default=10),
            OpenApiParameter('owner', OpenApiTypes.UUID, description='Only businesses owned by this user'),
        ],
        responses={200: BusinessListResponseSerializer, 400: MessageResponseSerializer},
        tags=['businesses'],
    )
    def list(self, request):
        """List businesses with pagination."""
        query = BusinessListQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        result = list_businesses(
            page=query.validated_data['page'],
            limit=query.validated_data['limit'],
            owner_id=query.validated_data.get('owner'),
        )

        return Response({
            'businesses': BusinessSerializer(result['businesses'], many=True).data,
            'pagination': result['pagination'],
        })

    @extend_schema(
        responses={200: BusinessDetailSerializer, 404: MessageResponseSerializer},
        tags=['businesses'],
    )
    def retrieve(self, request, pk=None):
        """Get a business with reviews."""
        business = get_business(business_id=pk)
        return Response(BusinessDetailSerializer(business).data)

    @extend_schema(
        request=BusinessWriteSerializer,
        responses={201: BusinessSerializer, 400: MessageResponseSerializer, 401: MessageResponseSerializer},
        tags=['businesses'],
    )
    def create(self, request):
        """Create a new business."""
        serializer = BusinessWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        business = create_business(owner=request.user, **serializer.validated_data)

        return Response(BusinessSerializer(business).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        request=BusinessWriteSerializer,
        responses={
            200: BusinessSerializer,
            403: MessageResponseSerializer,
            404: MessageResponseSerializer,
        },
        tags=['businesses'],
    )
    def update(self, request, pk=None):
        """Edit a business. Only provided fields change."""
        serializer = BusinessWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        business = update_business(business_id=pk, user=request.user, **serializer.validated_data)

        return Response(BusinessSerializer(business).data)

    def partial_update(self, request, pk=None):
        return self.update(request, pk=pk)

    @extend_schema(
        responses={
            200: MessageResponseSerializer,
            403: MessageResponseSerializer,
            404: MessageResponseSerializer,
        },
        tags=['businesses'],
    )
    def destroy(self, request, pk=None):
        """Delete a business and all its reviews."""
        result = delete_business(business_id=pk, user=request.user)
        return Response(result)

    @extend_schema(
        responses={200: CategorySerializer(many=True)},
        tags=['businesses'],
    )
    @action(detail=False, methods=['get'])
    def categories(self, request):
        """List the fixed business categories."""
        data = [{'id': value, 'name': label} for value, label in Category.choices]
        return Response(CategorySerializer(data, many=True).data)
