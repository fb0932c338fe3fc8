from django.urls import re_path
from . import views

app_name = 'users'

urlpatterns = [
    # Authentication
    re_path(r'^register/?$', views.register, name='register'),
    re_path(r'^login/?$', views.login, name='login'),

    # Current user
    re_path(r'^me/?$', views.get_current_user, name='current-user'),
]
