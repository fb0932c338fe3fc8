from django.contrib import admin
from django.db.models import Avg, Count
from .models import Business


@admin.register(Business)
class BusinessAdmin(admin.ModelAdmin):
    """Admin interface for Businesses."""

    list_display = [
        'name',
        'category_id',
        'owner',
        'review_total',
        'rating_average',
        'created_at'
    ]
    list_filter = ['category_id', 'created_at']
    search_fields = ['name', 'address', 'owner__email', 'owner__username']
    readonly_fields = ['id', 'created_at', 'updated_at']
    raw_id_fields = ['owner']
    ordering = ['-created_at']

    fieldsets = (
        ('Basic Information', {
            'fields': ('id', 'name', 'category_id', 'owner')
        }),
        ('Contact', {
            'fields': ('address', 'phone', 'website', 'google_map_url')
        }),
        ('Details', {
            'fields': ('description', 'photos')
        }),
        ('Metadata', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def review_total(self, obj):
        return obj.review_total
    review_total.short_description = 'Reviews'
    review_total.admin_order_field = 'review_total'

    def rating_average(self, obj):
        """Average rating rounded to one decimal."""
        if obj.rating_average is None:
            return 0
        return round(float(obj.rating_average), 1)
    rating_average.short_description = 'Avg rating'
    rating_average.admin_order_field = 'rating_average'

    def get_queryset(self, request):
        """Optimize query with annotation."""
        qs = super().get_queryset(request)
        return qs.select_related('owner').annotate(
            review_total=Count('reviews'),
            rating_average=Avg('reviews__rating'),
        )
