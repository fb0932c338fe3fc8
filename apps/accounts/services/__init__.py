"""Services for accounts business logic."""

from .exceptions import (
    RegistrationValidationError,
    DuplicateUserError,
    InvalidCredentialsError,
    InvalidTokenError,
    UserNotFoundError,
)
from .tokens import Credential, issue_token, verify_token
from .user_registration import register_user, public_user
from .user_authentication import login_user, authenticate_token

__all__ = [
    # Exceptions
    'RegistrationValidationError',
    'DuplicateUserError',
    'InvalidCredentialsError',
    'InvalidTokenError',
    'UserNotFoundError',
    # Tokens
    'Credential',
    'issue_token',
    'verify_token',
    # Services
    'register_user',
    'public_user',
    'login_user',
    'authenticate_token',
]
