import pytest
from datetime import timedelta
from uuid import uuid4
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from apps.reviews.models import Review


# =============================================================================
# Create Tests
# =============================================================================

@pytest.mark.django_db
class TestReviewCreate:
    """Tests for POST /api/reviews"""

    def test_create_requires_auth(self, api_client, review_business):
        data = {'business_id': str(review_business.id), 'rating': 5, 'comment': 'Great'}
        response = api_client.post(reverse('reviews:review-list'), data, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert Review.objects.count() == 0

    def test_create_success(self, review_auth_client, review_user, review_business):
        data = {'business_id': str(review_business.id), 'rating': 5, 'comment': 'Great'}
        response = review_auth_client.post(reverse('reviews:review-list'), data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['rating'] == 5
        assert response.data['comment'] == 'Great'
        assert str(response.data['business']) == str(review_business.id)
        assert response.data['user'] == {
            'id': str(review_user.id),
            'username': review_user.username,
            'email': review_user.email,
        }

    def test_create_rating_out_of_range(self, review_auth_client, review_business):
        data = {'business_id': str(review_business.id), 'rating': 6, 'comment': 'Too good'}
        response = review_auth_client.post(reverse('reviews:review-list'), data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {'message': 'Rating must be between 1 and 5'}
        assert Review.objects.count() == 0

    def test_create_missing_comment(self, review_auth_client, review_business):
        data = {'business_id': str(review_business.id), 'rating': 3}
        response = review_auth_client.post(reverse('reviews:review-list'), data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'comment' in response.data['errors']

    def test_create_unknown_business(self, review_auth_client):
        data = {'business_id': str(uuid4()), 'rating': 3, 'comment': 'Where?'}
        response = review_auth_client.post(reverse('reviews:review-list'), data, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data == {'message': 'Business not found'}

    def test_new_review_updates_business_summary(self, review_auth_client, api_client, review_business):
        data = {'business_id': str(review_business.id), 'rating': 3, 'comment': 'Okay'}
        review_auth_client.post(reverse('reviews:review-list'), data, format='json')

        url = reverse('businesses:business-detail', kwargs={'pk': review_business.id})
        response = api_client.get(url)

        assert response.data['average_rating'] == 3.0
        assert response.data['review_count'] == 1


# =============================================================================
# List Tests
# =============================================================================

@pytest.mark.django_db
class TestReviewLists:
    """Tests for GET /api/reviews/business/{id} and /api/reviews/user/{id}"""

    def test_business_reviews_newest_first(self, api_client, review_user, review_other_user, review_business):
        older = Review.objects.create(business=review_business, user=review_user, rating=2, comment='Meh')
        newer = Review.objects.create(business=review_business, user=review_other_user, rating=5, comment='Wow')
        Review.objects.filter(id=older.id).update(created_at=timezone.now() - timedelta(hours=1))

        url = reverse('reviews:review-business', kwargs={'business_id': review_business.id})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert [r['id'] for r in response.data] == [str(newer.id), str(older.id)]
        assert response.data[0]['user']['username'] == 'review_other'

    def test_business_reviews_unknown_business(self, api_client, db):
        url = reverse('reviews:review-business', kwargs={'business_id': uuid4()})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data == []

    def test_user_reviews_project_business(self, api_client, review, review_user, review_business):
        url = reverse('reviews:review-user', kwargs={'user_id': review_user.id})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 1
        assert response.data[0]['business'] == {
            'id': str(review_business.id),
            'name': review_business.name,
            'address': review_business.address,
            'category_id': review_business.category_id,
        }


# =============================================================================
# Update / Delete Tests
# =============================================================================

@pytest.mark.django_db
class TestReviewUpdate:
    """Tests for PUT/PATCH /api/reviews/{id}"""

    def test_author_updates(self, review_auth_client, review):
        url = reverse('reviews:review-detail', kwargs={'pk': review.id})
        response = review_auth_client.put(url, {'rating': 5}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['rating'] == 5
        assert response.data['comment'] == review.comment

    def test_patch_comment(self, review_auth_client, review):
        url = reverse('reviews:review-detail', kwargs={'pk': review.id})
        response = review_auth_client.patch(url, {'comment': 'Even better the second time'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['comment'] == 'Even better the second time'

    def test_non_author_forbidden(self, review_other_client, review):
        url = reverse('reviews:review-detail', kwargs={'pk': review.id})
        response = review_other_client.put(url, {'rating': 1}, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data == {'message': 'Not allowed to edit this review'}

    def test_invalid_rating(self, review_auth_client, review):
        url = reverse('reviews:review-detail', kwargs={'pk': review.id})
        response = review_auth_client.put(url, {'rating': 0}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        review.refresh_from_db()
        assert review.rating == 4

    def test_update_not_found(self, review_auth_client, db):
        url = reverse('reviews:review-detail', kwargs={'pk': uuid4()})
        response = review_auth_client.put(url, {'rating': 3}, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.django_db
class TestReviewDelete:
    """Tests for DELETE /api/reviews/{id}"""

    def test_author_deletes(self, review_auth_client, review):
        url = reverse('reviews:review-detail', kwargs={'pk': review.id})
        response = review_auth_client.delete(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'message': 'Review deleted'}
        assert not Review.objects.filter(id=review.id).exists()

    def test_non_author_forbidden(self, review_other_client, review):
        url = reverse('reviews:review-detail', kwargs={'pk': review.id})
        response = review_other_client.delete(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert Review.objects.filter(id=review.id).exists()

    def test_delete_requires_auth(self, api_client, review):
        url = reverse('reviews:review-detail', kwargs={'pk': review.id})
        response = api_client.delete(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
