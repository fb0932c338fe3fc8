import pytest
from datetime import timedelta
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework_simplejwt.tokens import AccessToken
from apps.accounts.models import User


# =============================================================================
# Registration Tests
# =============================================================================

@pytest.mark.django_db
class TestRegistration:
    """Tests for POST /api/auth/register"""

    def test_register_success(self, api_client):
        """Successfully register a new user."""
        url = reverse('users:register')
        data = {
            'username': 'newuser',
            'email': 'newuser@example.com',
            'password': 'secret1',
        }
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['token']
        assert response.data['user']['username'] == 'newuser'
        assert response.data['user']['email'] == 'newuser@example.com'
        assert 'password' not in response.data['user']
        assert User.objects.filter(email='newuser@example.com').exists()

    def test_register_accepts_trailing_slash(self, api_client):
        """Both /register and /register/ are served."""
        data = {
            'username': 'slashuser',
            'email': 'slash@example.com',
            'password': 'secret1',
        }
        response = api_client.post('/api/auth/register/', data, format='json')

        assert response.status_code == status.HTTP_201_CREATED

    def test_register_trims_fields(self, api_client):
        """Username and email are stored without surrounding whitespace."""
        url = reverse('users:register')
        data = {
            'username': '  spaced  ',
            'email': '  spaced@example.com ',
            'password': 'secret1',
        }
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert User.objects.filter(username='spaced', email='spaced@example.com').exists()

    def test_register_duplicate_email(self, api_client, user):
        """Cannot register with existing email."""
        url = reverse('users:register')
        data = {
            'username': 'someoneelse',
            'email': user.email,
            'password': 'secret1',
        }
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['message'] == 'Email already in use'

    def test_register_duplicate_username(self, api_client, user):
        """Cannot register with existing username."""
        url = reverse('users:register')
        data = {
            'username': user.username,
            'email': 'fresh@example.com',
            'password': 'secret1',
        }
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['message'] == 'Username already in use'

    def test_register_short_password(self, api_client):
        """Registration fails with a password under 6 characters."""
        url = reverse('users:register')
        data = {
            'username': 'weak',
            'email': 'weak@example.com',
            'password': '12345',
        }
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['message'] == 'Password must be at least 6 characters'
        assert not User.objects.filter(email='weak@example.com').exists()

    def test_register_missing_field(self, api_client):
        """Registration fails when a field is missing."""
        url = reverse('users:register')
        data = {
            'email': 'nouser@example.com',
            'password': 'secret1',
        }
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'username' in response.data['errors']
        assert response.data['message']


# =============================================================================
# Login Tests
# =============================================================================

@pytest.mark.django_db
class TestLogin:
    """Tests for POST /api/auth/login"""

    def test_login_with_email(self, api_client, user):
        """Successfully login with email."""
        url = reverse('users:login')
        data = {
            'email': user.email,
            'password': 'TestPass123!',
        }
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['token']
        assert response.data['user']['id'] == str(user.id)

    def test_login_with_username(self, api_client, user):
        """The email field also accepts the username."""
        url = reverse('users:login')
        data = {
            'email': user.username,
            'password': 'TestPass123!',
        }
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['user']['email'] == user.email

    def test_login_wrong_password(self, api_client, user):
        """Login fails with wrong password."""
        url = reverse('users:login')
        data = {
            'email': user.email,
            'password': 'WrongPass123!',
        }
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data == {'message': 'Invalid credentials'}

    def test_login_unknown_user(self, api_client, db):
        """Unknown user gets the same error as a wrong password."""
        url = reverse('users:login')
        data = {
            'email': 'nobody@example.com',
            'password': 'TestPass123!',
        }
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data == {'message': 'Invalid credentials'}

    def test_login_inactive_user(self, api_client, user_inactive):
        """Inactive users cannot log in."""
        url = reverse('users:login')
        data = {
            'email': user_inactive.email,
            'password': 'TestPass123!',
        }
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


# =============================================================================
# Current User Tests
# =============================================================================

@pytest.mark.django_db
class TestCurrentUser:
    """Tests for GET /api/auth/me"""

    def test_get_current_user(self, authenticated_client, user):
        """Get the authenticated user's public profile."""
        url = reverse('users:current-user')
        response = authenticated_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['id'] == str(user.id)
        assert response.data['username'] == user.username
        assert 'password' not in response.data

    def test_get_current_user_unauthenticated(self, api_client):
        """Unauthenticated request is rejected."""
        url = reverse('users:current-user')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert 'message' in response.data

    def test_garbage_token(self, api_client, db):
        """A token that doesn't verify is rejected."""
        api_client.credentials(HTTP_AUTHORIZATION='Bearer not-a-token')
        response = api_client.get(reverse('users:current-user'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['message'] == 'Invalid or expired token'

    def test_expired_token(self, api_client, user):
        """A token past its expiry is rejected."""
        token = AccessToken.for_user(user)
        token.set_exp(from_time=timezone.now() - timedelta(days=8))
        api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {token}')
        response = api_client.get(reverse('users:current-user'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_token_for_deleted_user(self, api_client, user):
        """A valid token whose user no longer exists is rejected."""
        token = AccessToken.for_user(user)
        user.delete()
        api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {token}')
        response = api_client.get(reverse('users:current-user'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['message'] == 'User not found'


# =============================================================================
# End-to-end
# =============================================================================

@pytest.mark.django_db
def test_register_conflict_then_login_by_username(api_client):
    """Register, hit a conflict on the same email, then log in by username."""
    register_url = reverse('users:register')

    first = api_client.post(register_url, {
        'username': 'bob',
        'email': 'bob@x.com',
        'password': 'secret1',
    }, format='json')
    assert first.status_code == status.HTTP_201_CREATED
    assert first.data['token']

    duplicate = api_client.post(register_url, {
        'username': 'robert',
        'email': 'bob@x.com',
        'password': 'secret1',
    }, format='json')
    assert duplicate.status_code == status.HTTP_400_BAD_REQUEST

    login = api_client.post(reverse('users:login'), {
        'email': 'bob',
        'password': 'secret1',
    }, format='json')
    assert login.status_code == status.HTTP_200_OK
    assert login.data['user']['id'] == first.data['user']['id']

    api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {login.data['token']}")
    me = api_client.get(reverse('users:current-user'))
    assert me.data['username'] == 'bob'
