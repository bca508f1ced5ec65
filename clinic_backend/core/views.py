"""Core app views.

Contains:
- health: Health check endpoint
- RegisterView / LoginView: credential check + JWT issuance with role claim
- RefreshView: JWT access token refresh
- MeView: Current authenticated user info
- UserListCreateView / UserDetailView: user administration (Admin only)
"""

import logging

from django.contrib.auth import get_user_model
from django.contrib.auth.models import update_last_login
from django.db import connection
from django.http import JsonResponse
from rest_framework import generics, status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.tokens import RefreshToken

from clinic_backend.core.permissions import IsAdmin
from clinic_backend.core.serializers import (
    LoginSerializer,
    RefreshSerializer,
    RegisterSerializer,
    UserCreateSerializer,
    UserMeSerializer,
    UserSerializer,
    UserUpdateSerializer,
)
from clinic_backend.core.services import issue_token
from clinic_backend.core.services.accounts import (
    RegistrationError,
    authenticate_credentials,
    register_user,
)
from clinic_backend.core.utils import log_action, save_existing

logger = logging.getLogger(__name__)

User = get_user_model()


def health(request):
    """Health check endpoint - no authentication required."""
    try:
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1;')
    except Exception as exc:
        logger.error('Health check failed: %s', exc)
        return JsonResponse({'status': 'error', 'detail': str(exc)}, status=503)

    return JsonResponse({'status': 'ok'})


def _auth_payload(user):
    tokens = issue_token(user)
    return {
        'token': tokens['access'],
        'refresh': tokens['refresh'],
        'username': user.username,
        'role': user.role,
    }


class RegisterView(APIView):
    """Self-registration.

    POST /api/auth/register
    Body: {"username": "...", "password": "...", "role": "Admin|Doctor|User", ...}
    Returns: {"token": "...", "refresh": "...", "username": "...", "role": "..."}
    """

    permission_classes = [AllowAny]
    authentication_classes = []

    def post(self, request, *args, **kwargs):
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            user = register_user(
                username=(data.get('username') or '').strip(),
                password=data.get('password') or '',
                role=data.get('role') or '',
                name=data.get('name'),
                pwz_number=data.get('pwzNumber'),
                specialty=data.get('specialty'),
                email=data.get('email'),
                phone_number=data.get('phoneNumber'),
            )
        except RegistrationError as e:
            return Response({'detail': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        log_action(user, 'user_register', 'User', user.id)
        return Response(_auth_payload(user), status=status.HTTP_200_OK)


class LoginView(APIView):
    """Obtain a JWT for username/password.

    POST /api/auth/login
    Body: {"username": "...", "password": "..."}
    Returns: {"token": "...", "refresh": "...", "username": "...", "role": "..."}
    """

    permission_classes = [AllowAny]
    authentication_classes = []

    def post(self, request, *args, **kwargs):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = authenticate_credentials(
            serializer.validated_data['username'],
            serializer.validated_data['password'],
        )
        if user is None:
            return Response(
                {'detail': 'Invalid username or password'},
                status=status.HTTP_401_UNAUTHORIZED,
            )

        update_last_login(None, user)
        return Response(_auth_payload(user), status=status.HTTP_200_OK)


class RefreshView(APIView):
    """Refresh JWT access token.

    POST /api/auth/refresh
    Body: {"refresh": "..."}
    Returns: {"token": "..."}
    """

    permission_classes = [AllowAny]
    authentication_classes = []

    def post(self, request, *args, **kwargs):
        serializer = RefreshSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        refresh = RefreshToken(serializer.validated_data['refresh'])
        return Response({'token': str(refresh.access_token)}, status=status.HTTP_200_OK)


class MeView(APIView):
    """Current authenticated user.

    GET /api/auth/me
    Returns: {"id": ..., "username": "...", "role": "...", "doctorId": ...}
    """

    permission_classes = [IsAuthenticated]

    def get(self, request, *args, **kwargs):
        serializer = UserMeSerializer(request.user)
        return Response(serializer.data, status=status.HTTP_200_OK)


class UserListCreateView(generics.ListCreateAPIView):
    """List all users or create one (Admin only)."""

    permission_classes = [IsAdmin]
    queryset = User.objects.all()

    def get_serializer_class(self):
        if self.request.method == 'POST':
            return UserCreateSerializer
        return UserSerializer

    def create(self, request, *args, **kwargs):
        write_serializer = self.get_serializer(data=request.data)
        write_serializer.is_valid(raise_exception=True)
        user = write_serializer.save()
        log_action(request.user, 'user_create', 'User', user.id)

        read_serializer = UserSerializer(user)
        headers = self.get_success_headers(read_serializer.data)
        return Response(read_serializer.data, status=status.HTTP_201_CREATED, headers=headers)


class UserDetailView(generics.RetrieveUpdateDestroyAPIView):
    """Retrieve, change the role of, or delete a user (Admin only)."""

    permission_classes = [IsAdmin]
    queryset = User.objects.all()

    def get_serializer_class(self):
        if self.request.method in ('PUT', 'PATCH'):
            return UserUpdateSerializer
        return UserSerializer

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        user = self.get_object()

        serializer = UserUpdateSerializer(user, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        save_existing(serializer)

        log_action(request.user, 'user_update', 'User', user.id, meta={'role': user.role})
        return Response(status=status.HTTP_204_NO_CONTENT)

    def perform_destroy(self, instance):
        user_id = instance.id
        instance.delete()
        log_action(self.request.user, 'user_delete', 'User', user_id)
