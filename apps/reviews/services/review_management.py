"""Review management service - CRUD operations for reviews."""

import logging
from decimal import Decimal, InvalidOperation
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction
from django.db.models import QuerySet
from uuid import UUID
from typing import Optional

from apps.accounts.models import User
from apps.businesses.models import Business
from apps.reviews.models import Review, MIN_RATING, MAX_RATING, MAX_COMMENT_LENGTH
from .exceptions import (
    ReviewNotFoundError,
    BusinessNotFoundError,
    InvalidRatingError,
    InvalidReviewError,
    UnauthorizedReviewActionError,
)

logger = logging.getLogger(__name__)


def _validate_rating(rating) -> int:
    """Coerce a numeric rating and check it lies in [1, 5]."""
    try:
        value = Decimal(str(rating))
    except (InvalidOperation, ValueError):
        raise InvalidRatingError("Rating must be a number between 1 and 5")

    if not value.is_finite():
        raise InvalidRatingError("Rating must be a number between 1 and 5")

    if not (MIN_RATING <= value <= MAX_RATING):
        raise InvalidRatingError("Rating must be between 1 and 5")
    if value != value.to_integral_value():
        raise InvalidRatingError("Rating must be a whole number of stars")

    return int(value)


def _clean_comment(comment: str) -> str:
    comment = (comment or '').strip()
    if not comment:
        raise InvalidReviewError("Comment cannot be empty")
    if len(comment) > MAX_COMMENT_LENGTH:
        raise InvalidReviewError(f"Comment must be at most {MAX_COMMENT_LENGTH} characters")
    return comment


@transaction.atomic
def create_review(
    *,
    author: User,
    business_id: UUID,
    rating,
    comment: str,
) -> Review:
    """
    Create a new review for a business.

    Args:
        author: User creating the review
        business_id: UUID of business being reviewed
        rating: Star rating (1-5)
        comment: Review text (trimmed, 1-1000 chars)

    Returns:
        Created Review instance with author loaded

    Raises:
        InvalidReviewError: If business_id, rating or comment is missing
        InvalidRatingError: If rating not in 1-5 range
        BusinessNotFoundError: If business doesn't exist
    """
    if not business_id or rating is None or not (comment or '').strip():
        raise InvalidReviewError("business_id, rating, and comment are required")

    rating = _validate_rating(rating)
    comment = _clean_comment(comment)

    try:
        business = Business.objects.get(id=business_id)
    except (Business.DoesNotExist, DjangoValidationError):
        raise BusinessNotFoundError("Business not found")

    review = Review.objects.create(
        business=business,
        user=author,
        rating=rating,
        comment=comment,
    )
    logger.info("User %s reviewed business %s (%s stars)", author.id, business.id, rating)

    return review


def get_review_by_id(*, review_id: UUID) -> Review:
    """
    Retrieve a review by ID.

    Raises:
        ReviewNotFoundError: If review doesn't exist
    """
    try:
        review = Review.objects.select_related('user', 'business').get(id=review_id)
    except Review.DoesNotExist:
        raise ReviewNotFoundError("Review not found")

    return review


def get_business_reviews(*, business_id: UUID) -> QuerySet[Review]:
    """All reviews of a business, newest first, with authors loaded."""
    return (
        Review.objects
        .filter(business_id=business_id)
        .select_related('user')
        .order_by('-created_at')
    )


def get_user_reviews(*, user_id: UUID) -> QuerySet[Review]:
    """All reviews written by a user, newest first, with businesses loaded."""
    return (
        Review.objects
        .filter(user_id=user_id)
        .select_related('business')
        .order_by('-created_at')
    )


@transaction.atomic
def update_review(
    *,
    review_id: UUID,
    user: User,
    rating=None,
    comment: Optional[str] = None,
) -> Review:
    """
    Update an existing review.

    Only the review author can update their review. Only the fields
    passed (not None) are changed; validation happens before any write.

    Args:
        review_id: UUID of review to update
        user: User making the update (must be author)
        rating: New rating (1-5)
        comment: New comment (non-empty after trimming)

    Returns:
        Updated Review instance

    Raises:
        ReviewNotFoundError: If review doesn't exist
        UnauthorizedReviewActionError: If user is not the author
        InvalidRatingError: If rating not in 1-5 range
        InvalidReviewError: If comment is blank
    """
    # Get review with row lock
    try:
        review = (
            Review.objects
            .select_for_update()
            .select_related('user')
            .get(id=review_id)
        )
    except Review.DoesNotExist:
        raise ReviewNotFoundError("Review not found")

    if review.user_id != user.id:
        logger.warning("User %s tried to edit review %s", user.id, review.id)
        raise UnauthorizedReviewActionError("Not allowed to edit this review")

    update_fields = []
    if rating is not None:
        review.rating = _validate_rating(rating)
        update_fields.append('rating')
    if comment is not None:
        review.comment = _clean_comment(comment)
        update_fields.append('comment')

    if update_fields:
        review.save(update_fields=update_fields + ['updated_at'])

    return review


@transaction.atomic
def delete_review(*, review_id: UUID, user: User) -> None:
    """
    Delete a review.

    Only the review author can delete their review.

    Raises:
        ReviewNotFoundError: If review doesn't exist
        UnauthorizedReviewActionError: If user is not the author
    """
    try:
        review = (
            Review.objects
            .select_for_update()
            .get(id=review_id)
        )
    except Review.DoesNotExist:
        raise ReviewNotFoundError("Review not found")

    if review.user_id != user.id:
        logger.warning("User %s tried to delete review %s", user.id, review.id)
        raise UnauthorizedReviewActionError("Not allowed to delete this review")

    review.delete()
