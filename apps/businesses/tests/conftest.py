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
def business_owner(db):
    """Create and return the user owning the test business."""
    return User.objects.create_user(
        email='owner@example.com',
        username='owner',
        password='TestPass123!',
    )


@pytest.fixture
def business_other_user(db):
    """Create and return a user who owns nothing."""
    return User.objects.create_user(
        email='stranger@example.com',
        username='stranger',
        password='TestPass123!',
    )


@pytest.fixture
def owner_client(business_owner):
    """Return API client authenticated as the business owner."""
    return _client_for(business_owner)


@pytest.fixture
def other_client(business_other_user):
    """Return API client authenticated as the other user."""
    return _client_for(business_other_user)


@pytest.fixture
def business(db, business_owner):
    """Create and return a business with an owner."""
    return Business.objects.create(
        name='Corner Cafe',
        address='1 Main Street',
        description='Espresso and pastries',
        phone='+1 555 0100',
        category_id=Category.CAFE,
        owner=business_owner,
    )


@pytest.fixture
def ownerless_business(db):
    """Create and return a business nobody has claimed yet."""
    return Business.objects.create(
        name='Old Town Bakery',
        address='5 Market Square',
        category_id=Category.FOOD,
        owner=None,
    )


@pytest.fixture
def business_reviews(db, business, business_owner, business_other_user):
    """Two reviews on ``business``: 4 and 5 stars."""
    return [
        Review.objects.create(business=business, user=business_owner, rating=4, comment='Good'),
        Review.objects.create(business=business, user=business_other_user, rating=5, comment='Great'),
    ]
