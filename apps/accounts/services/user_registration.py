"""User registration service."""

import logging

from django.conf import settings
from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import IntegrityError, transaction

from .exceptions import DuplicateUserError, RegistrationValidationError
from .tokens import issue_token

User = get_user_model()

logger = logging.getLogger(__name__)


def public_user(user) -> dict:
    """Client-facing projection of a user; never includes the hash."""
    return {
        'id': str(user.id),
        'username': user.username,
        'email': user.email,
    }


@transaction.atomic
def register_user(*, username: str, email: str, password: str) -> dict:
    """
    Register a new user and sign them in.

    Args:
        username: Desired username (trimmed, must be unique)
        email: Email address (trimmed, must be unique)
        password: Plain password, at least 6 characters

    Returns:
        Dict with ``token`` and the public ``user`` projection

    Raises:
        RegistrationValidationError: If a field is missing or password too short
        DuplicateUserError: If email or username is already in use
    """
    username = (username or '').strip()
    email = (email or '').strip()

    if not username or not email or not password:
        raise RegistrationValidationError("All fields are required")

    try:
        validate_password(password)
    except DjangoValidationError:
        raise RegistrationValidationError(
            f"Password must be at least {settings.MIN_PASSWORD_LENGTH} characters"
        )

    email = User.objects.normalize_email(email)

    # Login takes either field, so neither may collide with the other kind
    if (
        User.objects.filter(email__iexact=email).exists()
        or User.objects.filter(username__iexact=email).exists()
    ):
        raise DuplicateUserError("Email already in use")

    if (
        User.objects.filter(username=username).exists()
        or User.objects.filter(email__iexact=username).exists()
    ):
        raise DuplicateUserError("Username already in use")

    try:
        with transaction.atomic():
            user = User.objects.create_user(
                email=email,
                username=username,
                password=password,
            )
    except IntegrityError:
        # Unique constraint caught a concurrent registration
        raise DuplicateUserError("Email or username already in use")

    logger.info("Registered user %s (%s)", user.username, user.id)

    return {
        'token': issue_token(user),
        'user': public_user(user),
    }
