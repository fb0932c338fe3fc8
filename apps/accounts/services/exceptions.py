"""Domain-specific exceptions for accounts services."""

from apps.core.exceptions import AuthError, ConflictError, ValidationError


class RegistrationValidationError(ValidationError):
    """Raised when registration input is missing or too weak."""
    pass


class DuplicateUserError(ConflictError):
    """Raised when the email or username is already taken."""
    pass


class InvalidCredentialsError(AuthError):
    """Raised when login identifier or password does not match."""
    default_message = 'Invalid credentials'


class InvalidTokenError(AuthError):
    """Raised when a bearer token is malformed, expired or badly signed."""
    default_message = 'Invalid or expired token'


class UserNotFoundError(AuthError):
    """Raised when a valid token refers to a user that no longer exists."""
    default_message = 'User not found'
