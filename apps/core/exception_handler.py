"""DRF exception handler mapping service errors to HTTP responses."""

import logging

from django.db import DatabaseError
from rest_framework import status
from rest_framework import exceptions as drf_exceptions
from rest_framework.response import Response
from rest_framework.views import exception_handler

from . import exceptions as service_exceptions

logger = logging.getLogger(__name__)

STATUS_BY_ERROR = [
    (service_exceptions.ValidationError, status.HTTP_400_BAD_REQUEST),
    (service_exceptions.ConflictError, status.HTTP_400_BAD_REQUEST),
    (service_exceptions.AuthError, status.HTTP_401_UNAUTHORIZED),
    (service_exceptions.ForbiddenError, status.HTTP_403_FORBIDDEN),
    (service_exceptions.NotFoundError, status.HTTP_404_NOT_FOUND),
]

GENERIC_ERROR_MESSAGE = 'Server error'


def _first_error_message(detail):
    """Flatten a DRF ValidationError detail into one readable line."""
    if isinstance(detail, dict):
        for field, errors in detail.items():
            message = _first_error_message(errors)
            if field == 'non_field_errors':
                return message
            return f"{field}: {message}"
    if isinstance(detail, list) and detail:
        return _first_error_message(detail[0])
    return str(detail)


def api_exception_handler(exc, context):
    """
    Render every error as ``{"message": ...}``.

    Service errors map to their status code; DRF's own exceptions keep
    their status; anything else is logged with a traceback and reported
    as a generic 500.
    """
    view = context.get('view')
    view_name = view.__class__.__name__ if view else 'unknown'

    for error_class, status_code in STATUS_BY_ERROR:
        if isinstance(exc, error_class):
            return Response({'message': exc.message}, status=status_code)

    if isinstance(exc, drf_exceptions.ValidationError):
        return Response(
            {
                'message': _first_error_message(exc.detail),
                'errors': exc.detail,
            },
            status=status.HTTP_400_BAD_REQUEST,
        )

    response = exception_handler(exc, context)
    if response is not None:
        detail = response.data.get('detail') if isinstance(response.data, dict) else None
        response.data = {'message': str(detail) if detail else _first_error_message(response.data)}
        return response

    if isinstance(exc, (service_exceptions.InternalError, DatabaseError)):
        logger.error("Store failure in %s: %s", view_name, exc, exc_info=exc)
    else:
        logger.error("Unhandled error in %s: %s", view_name, exc, exc_info=exc)

    return Response(
        {'message': GENERIC_ERROR_MESSAGE},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
