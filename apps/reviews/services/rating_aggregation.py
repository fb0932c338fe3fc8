"""Rating aggregation service - derived rating summaries for businesses."""

from decimal import Decimal, ROUND_HALF_UP
from django.db.models import Avg, Count
from uuid import UUID
from typing import Iterable

from apps.reviews.models import Review


def _summary(avg, count) -> dict:
    # Half-up to one decimal: 1.25 -> 1.3
    return {
        'average_rating': float(Decimal(str(avg)).quantize(Decimal('0.1'), rounding=ROUND_HALF_UP)) if count else 0,
        'review_count': count,
    }


def summarize_business_ratings(*, business_id: UUID) -> dict:
    """
    Compute the rating summary for one business from its current reviews.

    Nothing is cached: every call re-reads the review set, so the result
    always reflects the latest create/update/delete.

    Args:
        business_id: Business UUID

    Returns:
        Dictionary with:
        - average_rating: mean rating rounded to 1 decimal, 0 without reviews
        - review_count: number of reviews

    Example:
        >>> summarize_business_ratings(business_id=business.id)
        {'average_rating': 4.3, 'review_count': 3}
    """
    aggregates = Review.objects.filter(business_id=business_id).aggregate(
        avg=Avg('rating'),
        count=Count('id'),
    )
    return _summary(aggregates['avg'], aggregates['count'])


def summarize_many(*, business_ids: Iterable[UUID]) -> dict:
    """
    Compute rating summaries for several businesses in one grouped query.

    Businesses without reviews are included with a zero summary.

    Returns:
        Mapping of business id -> summary dict (see summarize_business_ratings)
    """
    business_ids = list(business_ids)
    summaries = {business_id: _summary(None, 0) for business_id in business_ids}

    rows = (
        Review.objects
        .filter(business_id__in=business_ids)
        .values('business_id')
        .annotate(avg=Avg('rating'), count=Count('id'))
        .order_by()
    )
    for row in rows:
        summaries[row['business_id']] = _summary(row['avg'], row['count'])

    return summaries
