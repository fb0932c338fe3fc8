from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'reviews'

# Paths are served with or without the trailing slash; mounted under /api/
router = SimpleRouter(trailing_slash='/?')
router.register(r'reviews', views.ReviewViewSet, basename='review')

urlpatterns = [
    # Review ViewSet routes
    # POST   /api/reviews                         - Create review
    # GET    /api/reviews/business/{business_id}  - Reviews of a business
    # GET    /api/reviews/user/{user_id}          - Reviews written by a user
    # GET    /api/reviews/{id}                    - Get review
    # PUT    /api/reviews/{id}                    - Update review (author only)
    # PATCH  /api/reviews/{id}                    - Update review (author only)
    # DELETE /api/reviews/{id}                    - Delete review (author only)

    path('', include(router.urls)),
]
