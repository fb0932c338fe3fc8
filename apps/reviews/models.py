from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator
import uuid

MIN_RATING = 1
MAX_RATING = 5
MAX_COMMENT_LENGTH = 1000


class Review(models.Model):
    """Star rating plus text review of a business."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    business = models.ForeignKey('businesses.Business', on_delete=models.CASCADE, related_name='reviews')
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='reviews')
    rating = models.PositiveSmallIntegerField(validators=[MinValueValidator(MIN_RATING), MaxValueValidator(MAX_RATING)])
    comment = models.TextField(max_length=MAX_COMMENT_LENGTH)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'reviews'
        indexes = [
            models.Index(fields=['business', 'created_at'], name='reviews_business_idx'),
            models.Index(fields=['user', 'created_at'], name='reviews_user_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.user.username} - {self.business.name} ({self.rating}★)"
