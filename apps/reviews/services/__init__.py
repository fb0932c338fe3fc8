"""
Reviews services - Business logic layer.

This package contains all business operations for the reviews app:
- Review CRUD operations
- Rating aggregation for businesses
"""

# Review Management
from .review_management import (
    create_review,
    get_review_by_id,
    get_business_reviews,
    get_user_reviews,
    update_review,
    delete_review,
)

# Rating Aggregation
from .rating_aggregation import (
    summarize_business_ratings,
    summarize_many,
)

# Domain Exceptions
from .exceptions import (
    ReviewNotFoundError,
    BusinessNotFoundError,
    InvalidRatingError,
    InvalidReviewError,
    UnauthorizedReviewActionError,
)

__all__ = [
    # Review Management Services
    'create_review',
    'get_review_by_id',
    'get_business_reviews',
    'get_user_reviews',
    'update_review',
    'delete_review',
    # Rating Aggregation Services
    'summarize_business_ratings',
    'summarize_many',
    # Exceptions
    'ReviewNotFoundError',
    'BusinessNotFoundError',
    'InvalidRatingError',
    'InvalidReviewError',
    'UnauthorizedReviewActionError',
]
