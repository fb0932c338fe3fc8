"""Domain exceptions for reviews app."""

from apps.core.exceptions import ForbiddenError, NotFoundError, ValidationError


class ReviewNotFoundError(NotFoundError):
    """Review does not exist."""
    default_message = 'Review not found'


class BusinessNotFoundError(NotFoundError):
    """Reviewed business does not exist."""
    default_message = 'Business not found'


class InvalidRatingError(ValidationError):
    """Rating must be between 1 and 5."""
    default_message = 'Rating must be between 1 and 5'


class InvalidReviewError(ValidationError):
    """Required review fields are missing or blank."""
    pass


class UnauthorizedReviewActionError(ForbiddenError):
    """User cannot modify this review."""
    pass
