"""Core App URLs - Authentication, Health & Users.

Prefix: /api/
Routes (trailing slash optional):
    GET    /api/health            - Health check (no auth)
    POST   /api/auth/register     - Register, returns JWT
    POST   /api/auth/login        - Login, returns JWT
    POST   /api/auth/refresh      - Refresh access token
    GET    /api/auth/me           - Current user info
    GET    /api/users             - List users (Admin)
    POST   /api/users             - Create user (Admin)
    GET/PUT/DELETE /api/users/<pk> - User detail / role change / delete (Admin)
"""

from django.urls import re_path

from clinic_backend.core.views import (
    LoginView,
    MeView,
    RefreshView,
    RegisterView,
    UserDetailView,
    UserListCreateView,
    health,
)

app_name = 'core'

urlpatterns = [
    re_path(r'^health/?$', health, name='health'),

    re_path(r'^auth/register/?$', RegisterView.as_view(), name='register'),
    re_path(r'^auth/login/?$', LoginView.as_view(), name='login'),
    re_path(r'^auth/refresh/?$', RefreshView.as_view(), name='refresh'),
    re_path(r'^auth/me/?$', MeView.as_view(), name='me'),

    re_path(r'^users/?$', UserListCreateView.as_view(), name='user_list'),
    re_path(r'^users/(?P<pk>\d+)/?$', UserDetailView.as_view(), name='user_detail'),
]
