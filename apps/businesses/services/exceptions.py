"""Domain-specific exceptions for businesses services."""

from apps.core.exceptions import ForbiddenError, NotFoundError, ValidationError


class BusinessNotFoundError(NotFoundError):
    """Raised when business does not exist."""
    default_message = 'Business not found'


class InvalidBusinessError(ValidationError):
    """Raised when business fields are missing or invalid."""
    default_message = 'Missing required fields'


class InvalidPaginationError(ValidationError):
    """Raised when page/limit are out of bounds."""
    pass


class NotBusinessOwnerError(ForbiddenError):
    """Raised when a user tries to modify a business they do not own."""
    pass
