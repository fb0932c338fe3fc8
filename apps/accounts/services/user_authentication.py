"""User authentication service."""

import logging

from django.contrib.auth import get_user_model
from django.db import transaction
from django.utils import timezone

from .exceptions import InvalidCredentialsError, UserNotFoundError
from .tokens import issue_token, verify_token
from .user_registration import public_user

User = get_user_model()

logger = logging.getLogger(__name__)


@transaction.atomic
def login_user(*, identifier: str, password: str) -> dict:
    """
    Authenticate with email or username and password.

    Unknown user and wrong password produce the same error so the
    response never reveals which part was wrong.

    Args:
        identifier: Registered email or username
        password: User's password

    Returns:
        Dict with ``token`` and the public ``user`` projection

    Raises:
        InvalidCredentialsError: If no user matches or password is wrong
    """
    identifier = (identifier or '').strip()
    if not identifier or not password:
        raise InvalidCredentialsError("Invalid credentials")

    try:
        user = User.objects.get_by_identifier(identifier)
    except (User.DoesNotExist, User.MultipleObjectsReturned):
        logger.warning("Failed login for unknown identifier %r", identifier)
        raise InvalidCredentialsError("Invalid credentials")

    if not user.check_password(password) or not user.is_active:
        logger.warning("Failed login for user %s", user.id)
        raise InvalidCredentialsError("Invalid credentials")

    user.last_login = timezone.now()
    user.save(update_fields=['last_login'])

    logger.info("User %s logged in", user.id)

    return {
        'token': issue_token(user),
        'user': public_user(user),
    }


def authenticate_token(*, token: str, secret: str):
    """
    Resolve a bearer token to an existing, active user.

    Raises:
        InvalidTokenError: If the token fails verification
        UserNotFoundError: If the embedded user id no longer resolves
    """
    credential = verify_token(token, secret)

    try:
        user = User.objects.get(id=credential.user_id, is_active=True)
    except User.DoesNotExist:
        raise UserNotFoundError("User not found")

    return user
