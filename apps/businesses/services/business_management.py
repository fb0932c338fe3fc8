"""Business management service - listing, CRUD and ownership rules."""

import logging
import math
from django.conf import settings
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction
from django.utils import timezone
from uuid import UUID
from typing import Optional

from apps.accounts.models import User
from apps.businesses.models import Business
from apps.reviews.models import Review
from apps.reviews.services import get_business_reviews, summarize_business_ratings, summarize_many
from .exceptions import (
    BusinessNotFoundError,
    InvalidBusinessError,
    InvalidPaginationError,
    NotBusinessOwnerError,
)

logger = logging.getLogger(__name__)

MAX_PAGE_SIZE = 100

REQUIRED_FIELDS = ['name', 'address', 'category_id']

EDITABLE_FIELDS = [
    'name',
    'description',
    'address',
    'phone',
    'website',
    'category_id',
    'google_map_url',
    'photos',
]

TRIMMED_FIELDS = ['name', 'description', 'address', 'phone', 'website', 'google_map_url']

# Optional fields passed as None are reset to these values
CLEARED_VALUES = {
    'description': '',
    'phone': '',
    'website': '',
    'google_map_url': '',
    'photos': [],
}


def _attach_summary(business: Business, summary: dict) -> Business:
    business.average_rating = summary['average_rating']
    business.review_count = summary['review_count']
    return business


def _clean_fields(fields: dict) -> dict:
    """
    Keep only editable fields, trim text and check the photo list.

    ``None`` clears an optional field (see CLEARED_VALUES); for a required
    field it means "leave unchanged".
    """
    cleaned = {}
    for field in EDITABLE_FIELDS:
        if field not in fields:
            continue
        value = fields[field]
        if value is None:
            if field not in CLEARED_VALUES:
                continue
            value = list(CLEARED_VALUES[field]) if field == 'photos' else CLEARED_VALUES[field]
        if field in TRIMMED_FIELDS and isinstance(value, str):
            value = value.strip()
        cleaned[field] = value

    photos = cleaned.get('photos')
    if photos is not None:
        if not isinstance(photos, list) or not all(isinstance(p, str) for p in photos):
            raise InvalidBusinessError("photos must be a list of strings")

    return cleaned


def _full_clean(business: Business) -> None:
    """Run model validation (lengths, category choices, URL format)."""
    try:
        business.full_clean(exclude=['owner'])
    except DjangoValidationError as e:
        field, messages = next(iter(e.message_dict.items()))
        raise InvalidBusinessError(f"{field}: {messages[0]}")


def _get_business(business_id: UUID, *, for_update: bool = False) -> Business:
    queryset = Business.objects.all()
    if for_update:
        queryset = queryset.select_for_update()
    try:
        return queryset.get(id=business_id)
    except (Business.DoesNotExist, DjangoValidationError):
        raise BusinessNotFoundError("Business not found")


def _claim_or_check_owner(*, business_id: UUID, user: User, action: str) -> Business:
    """
    Resolve the owner of a business for a write, claiming it if unowned.

    The claim is a single conditional UPDATE (``owner IS NULL``), so when
    two users race for an ownerless business exactly one of them wins and
    the other gets NotBusinessOwnerError. Must run inside a transaction.
    """
    business = _get_business(business_id, for_update=True)

    if business.owner_id is None:
        claimed = (
            Business.objects
            .filter(id=business.id, owner__isnull=True)
            .update(owner=user, updated_at=timezone.now())
        )
        if claimed:
            logger.info("User %s claimed ownerless business %s", user.id, business.id)
        business.refresh_from_db()

    if business.owner_id != user.id:
        logger.warning("User %s tried to %s business %s owned by %s", user.id, action, business.id, business.owner_id)
        raise NotBusinessOwnerError(f"Not allowed to {action} this business")

    return business


def list_businesses(
    *,
    page: int = 1,
    limit: int = 10,
    owner_id: Optional[UUID] = None,
) -> dict:
    """
    Get one page of businesses, each annotated with its rating summary.

    Args:
        page: 1-based page number
        limit: Page size (1-100)
        owner_id: Only businesses owned by this user

    Returns:
        Dictionary with:
        - businesses: list of Business instances with ``average_rating``
          and ``review_count`` attributes
        - pagination: page, limit, total, totalPages, hasNext, hasPrev

    Raises:
        InvalidPaginationError: If page < 1 or limit outside 1-100
    """
    if page < 1 or limit < 1 or limit > MAX_PAGE_SIZE:
        raise InvalidPaginationError(
            "Invalid pagination parameters. Page must be >= 1, "
            f"limit must be between 1 and {MAX_PAGE_SIZE}"
        )

    queryset = Business.objects.all()
    if owner_id:
        queryset = queryset.filter(owner_id=owner_id)

    total = queryset.count()
    offset = (page - 1) * limit
    businesses = list(queryset[offset:offset + limit])

    summaries = summarize_many(business_ids=[b.id for b in businesses])
    for business in businesses:
        _attach_summary(business, summaries[business.id])

    return {
        'businesses': businesses,
        'pagination': {
            'page': page,
            'limit': limit,
            'total': total,
            'totalPages': math.ceil(total / limit),
            'hasNext': page * limit < total,
            'hasPrev': page > 1,
        },
    }


def get_business(*, business_id: UUID) -> Business:
    """
    Get a business with its reviews and rating summary.

    Returns:
        Business instance with ``reviews_list`` (newest first, authors
        loaded), ``average_rating`` and ``review_count`` attributes

    Raises:
        BusinessNotFoundError: If business doesn't exist
    """
    business = _get_business(business_id)
    business.reviews_list = list(get_business_reviews(business_id=business.id))
    return _attach_summary(business, summarize_business_ratings(business_id=business.id))


@transaction.atomic
def create_business(*, owner: User, **fields) -> Business:
    """
    Create a business owned by the requesting user.

    Raises:
        InvalidBusinessError: If name, address or category_id is missing,
            or any field fails model validation
    """
    cleaned = _clean_fields(fields)

    missing = [f for f in REQUIRED_FIELDS if not cleaned.get(f)]
    if missing:
        raise InvalidBusinessError(f"Missing required fields: {', '.join(missing)}")

    business = Business(owner=owner, **cleaned)
    _full_clean(business)
    business.save()

    logger.info("User %s created business %s", owner.id, business.id)
    return _attach_summary(business, {'average_rating': 0, 'review_count': 0})


@transaction.atomic
def update_business(*, business_id: UUID, user: User, **fields) -> Business:
    """
    Partially update a business.

    Fields absent from ``fields`` keep their current value; optional fields
    passed as ``None`` are cleared.
    An ownerless business is claimed by ``user`` first (claim-on-write).

    Raises:
        BusinessNotFoundError: If business doesn't exist
        NotBusinessOwnerError: If another user owns the business
        InvalidBusinessError: If a provided field is invalid
    """
    business = _claim_or_check_owner(business_id=business_id, user=user, action='edit')

    cleaned = _clean_fields(fields)
    for field in REQUIRED_FIELDS:
        if field in cleaned and not cleaned[field]:
            raise InvalidBusinessError(f"{field} cannot be empty")

    if cleaned:
        for field, value in cleaned.items():
            setattr(business, field, value)
        _full_clean(business)
        business.save(update_fields=list(cleaned) + ['updated_at'])

    return _attach_summary(business, summarize_business_ratings(business_id=business.id))


def _delete_owned_business(business: Business) -> int:
    purged, _ = Review.objects.filter(business_id=business.id).delete()
    business.delete()
    return purged


def delete_business(*, business_id: UUID, user: User) -> dict:
    """
    Delete a business and all of its reviews.

    Ownership resolution follows update_business (claim-on-write). Reviews
    are purged first, then the business row. With
    ``settings.BUSINESS_DELETE_ATOMIC`` both steps share one transaction;
    otherwise each step commits on its own and an interruption between
    them leaves orphaned reviews.

    Raises:
        BusinessNotFoundError: If business doesn't exist
        NotBusinessOwnerError: If another user owns the business
    """
    if settings.BUSINESS_DELETE_ATOMIC:
        with transaction.atomic():
            business = _claim_or_check_owner(business_id=business_id, user=user, action='delete')
            purged = _delete_owned_business(business)
    else:
        with transaction.atomic():
            business = _claim_or_check_owner(business_id=business_id, user=user, action='delete')
        purged, _ = Review.objects.filter(business_id=business.id).delete()
        logger.info("Purged %s reviews of business %s (non-atomic delete)", purged, business.id)
        business.delete()

    logger.info("User %s deleted business %s and %s reviews", user.id, business_id, purged)
    return {'message': 'Business deleted'}
