"""Services for businesses business logic."""

from .exceptions import (
    BusinessNotFoundError,
    InvalidBusinessError,
    InvalidPaginationError,
    NotBusinessOwnerError,
)
from .business_management import (
    list_businesses,
    get_business,
    create_business,
    update_business,
    delete_business,
    MAX_PAGE_SIZE,
)

__all__ = [
    # Exceptions
    'BusinessNotFoundError',
    'InvalidBusinessError',
    'InvalidPaginationError',
    'NotBusinessOwnerError',
    # Business Management
    'list_businesses',
    'get_business',
    'create_business',
    'update_business',
    'delete_business',
    'MAX_PAGE_SIZE',
]
