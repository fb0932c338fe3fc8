"""
URL configuration for the review platform.

All API routes live under /api/ and accept paths with or without a trailing slash.
"""
from django.contrib import admin
from django.urls import path, include, re_path
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from config.views import api_root, health_check

urlpatterns = [
    # Health check
    re_path(r'^api/health/?$', health_check, name='health-check'),

    # Admin
    path('admin/', admin.site.urls),

    # API Documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='api-schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='api-schema'), name='api-docs'),

    # Authentication
    path('api/auth/', include('apps.accounts.urls')),

    # API endpoints
    path('api/', include('apps.businesses.urls')),
    path('api/', include('apps.reviews.urls')),

    path('', api_root, name='api-root'),
]


# Custom error handlers
handler404 = 'config.views.error_404'
handler500 = 'config.views.error_500'
