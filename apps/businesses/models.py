from django.core.validators import MaxLengthValidator
from django.db import models
import uuid


class Category(models.TextChoices):
    RESTAURANT = 'cat-restaurant', 'Restaurant'
    CAFE = 'cat-cafe', 'Cafe'
    RETAIL = 'cat-retail', 'Retail'
    FITNESS = 'cat-fitness', 'Fitness'
    SERVICES = 'cat-services', 'Services'
    BEAUTY = 'cat-beauty', 'Beauty & Spa'
    HEALTHCARE = 'cat-healthcare', 'Healthcare'
    EDUCATION = 'cat-education', 'Education'
    ENTERTAINMENT = 'cat-entertainment', 'Entertainment'
    AUTOMOTIVE = 'cat-automotive', 'Automotive'
    # Legacy
    FOOD = 'cat-food', 'Food & Drink'


class Business(models.Model):
    """A listed local business."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=120)
    description = models.TextField(max_length=1000, blank=True, validators=[MaxLengthValidator(1000)])
    address = models.CharField(max_length=200)
    phone = models.CharField(max_length=50, blank=True)
    website = models.CharField(max_length=300, blank=True)
    category_id = models.CharField(max_length=50, choices=Category.choices)
    # Nullable: legacy rows have no owner until someone claims them on first write
    owner = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='businesses',
    )
    google_map_url = models.URLField(max_length=500, blank=True)
    photos = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'businesses'
        indexes = [
            models.Index(fields=['owner', 'created_at'], name='businesses_owner_idx'),
            models.Index(fields=['category_id'], name='businesses_category_idx'),
        ]
        ordering = ['-created_at', 'id']

    def __str__(self):
        return self.name
