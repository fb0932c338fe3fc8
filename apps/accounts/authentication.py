import logging

from django.conf import settings
from drf_spectacular.extensions import OpenApiAuthenticationExtension
from drf_spectacular.plumbing import build_bearer_security_scheme_object
from rest_framework import authentication, exceptions

from .services import authenticate_token
from .services.exceptions import InvalidTokenError, UserNotFoundError

logger = logging.getLogger(__name__)


class BearerTokenAuthentication(authentication.BaseAuthentication):
    """
    Authenticate requests carrying ``Authorization: Bearer <token>``.

    Requests without the header stay anonymous; write endpoints then
    reject them through their permission classes (401).
    """

    keyword = 'Bearer'

    def authenticate(self, request):
        header = authentication.get_authorization_header(request).split()

        if not header or header[0].lower() != self.keyword.lower().encode():
            return None

        if len(header) != 2:
            raise exceptions.AuthenticationFailed('Invalid or expired token')

        try:
            token = header[1].decode()
        except UnicodeError:
            raise exceptions.AuthenticationFailed('Invalid or expired token')

        try:
            user = authenticate_token(
                token=token,
                secret=settings.SIMPLE_JWT['SIGNING_KEY'],
            )
        except (InvalidTokenError, UserNotFoundError) as e:
            logger.info("Rejected bearer token: %s", e.message)
            raise exceptions.AuthenticationFailed(e.message)

        return (user, token)

    def authenticate_header(self, request):
        return self.keyword


class BearerTokenScheme(OpenApiAuthenticationExtension):
    """Describe the bearer scheme in the generated OpenAPI schema."""

    target_class = 'apps.accounts.authentication.BearerTokenAuthentication'
    name = 'bearerAuth'

    def get_security_definition(self, auto_schema):
        return build_bearer_security_scheme_object(
            header_name='Authorization',
            token_prefix='Bearer',
            bearer_format='JWT',
        )
