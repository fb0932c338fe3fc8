import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import AccessToken
from apps.accounts.models import User
from apps.businesses.models import Business, Category
from apps.reviews.models import Review


def _client_for(user):
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {AccessToken.for_user(user)}')
    return client


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def review_user(db):
    """Create and return a test user for reviews."""
    return User.objects.create_user(
        email='reviewer@example.com',
        username='reviewer',
        password='TestPass123!',
    )


@pytest.fixture
def review_other_user(db):
    """Create and return another test user for reviews."""
    return User.objects.create_user(
        email='review_other@example.com',
        username='review_other',
        password='TestPass123!',
    )


@pytest.fixture
def review_auth_client(review_user):
    """Return API client authenticated as review user."""
    return _client_for(review_user)


@pytest.fixture
def review_other_client(review_other_user):
    """Return API client authenticated as other user."""
    return _client_for(review_other_user)


@pytest.fixture
def review_business(db):
    """Create and return a business to review."""
    return Business.objects.create(
        name='Luigi Trattoria',
        address='48 Harbor Road',
        category_id=Category.RESTAURANT,
    )


@pytest.fixture
def review_another_business(db):
    """Create and return another business to review."""
    return Business.objects.create(
        name='Page Turner Books',
        address='77 Elm Avenue',
        category_id=Category.RETAIL,
    )


@pytest.fixture
def review(db, review_user, review_business):
    """Create and return a 4-star review by ``review_user``."""
    return Review.objects.create(
        business=review_business,
        user=review_user,
        rating=4,
        comment='Carbonara was excellent.',
    )
