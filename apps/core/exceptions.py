"""
Error taxonomy shared by all service layers.

Services raise these (or app-specific subclasses defined in each app's
``services/exceptions.py``); they carry no HTTP knowledge. The API
boundary maps each kind to a status code in
``apps.core.exception_handler``.

Exception Hierarchy:
    ServiceError (base)
    ├── ValidationError     malformed or out-of-range input
    ├── AuthError           missing/invalid credential or failed login
    ├── ForbiddenError      authenticated but not owner/author
    ├── NotFoundError       referenced entity does not exist
    ├── ConflictError       uniqueness violation
    └── InternalError       store failure or unexpected state
"""


class ServiceError(Exception):
    """Base exception for all service errors."""

    default_message = 'Request failed'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ServiceError):
    default_message = 'Invalid input'


class AuthError(ServiceError):
    default_message = 'Authentication required'


class ForbiddenError(ServiceError):
    default_message = 'You do not have permission to perform this action'


class NotFoundError(ServiceError):
    default_message = 'Not found'


class ConflictError(ServiceError):
    default_message = 'Resource already exists'


class InternalError(ServiceError):
    default_message = 'Server error'
