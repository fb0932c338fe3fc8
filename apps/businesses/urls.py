from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'businesses'

# Paths are served with or without the trailing slash; mounted under /api/
router = SimpleRouter(trailing_slash='/?')
router.register(r'businesses', views.BusinessViewSet, basename='business')

urlpatterns = [
    # Business ViewSet routes
    # GET    /api/businesses              - List businesses (page, limit, owner)
    # POST   /api/businesses              - Create business
    # GET    /api/businesses/categories   - List categories
    # GET    /api/businesses/{id}         - Get business with reviews
    # PUT    /api/businesses/{id}         - Update business (owner only)
    # PATCH  /api/businesses/{id}         - Update business (owner only)
    # DELETE /api/businesses/{id}         - Delete business and reviews (owner only)

    path('', include(router.urls)),
]
