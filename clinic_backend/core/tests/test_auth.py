"""Tests for Authentication endpoints.

Tests cover:
- Register (POST /api/auth/register)
- Login (POST /api/auth/login)
- Refresh (POST /api/auth/refresh)
- Me (GET /api/auth/me)
- Health (GET /api/health)
- Tokens carry the role claim
"""

from __future__ import annotations

import jwt
from django.conf import settings
from django.test import TestCase

from rest_framework import status
from rest_framework.test import APIClient

from clinic_backend.core.models import AuditLog, Role, User
from clinic_backend.doctors.models import Doctor


def _decode(token: str) -> dict:
    return jwt.decode(
        token,
        settings.SIMPLE_JWT["SIGNING_KEY"],
        algorithms=[settings.SIMPLE_JWT["ALGORITHM"]],
    )


class RegisterTest(TestCase):
    """Tests for POST /api/auth/register."""

    databases = {"default"}

    def setUp(self):
        self.client = APIClient()
        self.client.defaults["HTTP_HOST"] = "localhost"
        User.objects.create_user(username="taken", password="SecurePass123!", role=Role.USER)

    def test_register_user_returns_token(self):
        response = self.client.post(
            "/api/auth/register",
            {"username": "newbie", "password": "SecurePass123!", "role": "User"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["username"], "newbie")
        self.assertEqual(response.data["role"], "User")
        self.assertEqual(_decode(response.data["token"])["role"], "User")

        user = User.objects.get(username="newbie")
        self.assertTrue(user.password.startswith("bcrypt_sha256$"))
        self.assertTrue(user.check_password("SecurePass123!"))
        self.assertFalse(Doctor.objects.filter(user=user).exists())
        self.assertTrue(AuditLog.objects.filter(action="user_register", object_id=user.id).exists())

    def test_register_doctor_creates_profile_with_defaults(self):
        response = self.client.post(
            "/api/auth/register",
            {"username": "house", "password": "SecurePass123!", "role": "Doctor"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        doctor = Doctor.objects.get(user__username="house")
        self.assertEqual(doctor.name, "Dr. house")
        self.assertEqual(doctor.pwz_number, "TBD")
        self.assertEqual(doctor.specialty, "General Medicine")
        self.assertEqual(doctor.work_hours, "9:00-17:00")

    def test_register_doctor_uses_supplied_profile_fields(self):
        response = self.client.post(
            "/api/auth/register",
            {
                "username": "wilson",
                "password": "SecurePass123!",
                "role": "Doctor",
                "name": "Dr. James Wilson",
                "pwzNumber": "98765",
                "specialty": "Oncology",
                "email": "wilson@example.com",
                "phoneNumber": "555-0101",
            },
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        doctor = Doctor.objects.get(user__username="wilson")
        self.assertEqual(doctor.name, "Dr. James Wilson")
        self.assertEqual(doctor.pwz_number, "98765")
        self.assertEqual(doctor.specialty, "Oncology")
        self.assertEqual(doctor.email, "wilson@example.com")
        self.assertEqual(doctor.phone_number, "555-0101")

    def test_register_missing_credentials(self):
        response = self.client.post("/api/auth/register", {"username": "x", "role": "User"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["detail"], "Username and password are required")

    def test_register_taken_username(self):
        response = self.client.post(
            "/api/auth/register",
            {"username": "taken", "password": "SecurePass123!", "role": "User"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["detail"], "Username is already taken")

    def test_register_invalid_role(self):
        response = self.client.post(
            "/api/auth/register",
            {"username": "nurse", "password": "SecurePass123!", "role": "Nurse"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["detail"], "Invalid role")
        self.assertFalse(User.objects.filter(username="nurse").exists())


class AuthenticationTest(TestCase):
    """Tests for login, refresh and me."""

    databases = {"default"}

    def setUp(self):
        self.admin = User.objects.create_user(
            username="admin_auth_test",
            password="SecurePass123!",
            role=Role.ADMIN,
        )
        self.doctor = User.objects.create_user(
            username="doctor_auth_test",
            password="SecurePass123!",
            role=Role.DOCTOR,
        )
        self.profile = Doctor.objects.create(name="Dr. Auth", specialty="Cardiology", user=self.doctor)
        self.inactive_user = User.objects.create_user(
            username="inactive_auth_test",
            password="SecurePass123!",
            role=Role.USER,
            is_active=False,
        )

        self.client = APIClient()
        self.client.defaults["HTTP_HOST"] = "localhost"

    def _login(self, username, password="SecurePass123!"):
        return self.client.post(
            "/api/auth/login",
            {"username": username, "password": password},
            format="json",
        )

    # ========== LOGIN TESTS ==========

    def test_login_success_returns_token_with_role_claim(self):
        response = self._login("admin_auth_test")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["username"], "admin_auth_test")
        self.assertEqual(response.data["role"], "Admin")
        self.assertIn("refresh", response.data)

        claims = _decode(response.data["token"])
        self.assertEqual(claims["role"], "Admin")
        self.assertEqual(claims["username"], "admin_auth_test")
        self.assertEqual(claims["id"], self.admin.id)

        self.admin.refresh_from_db()
        self.assertIsNotNone(self.admin.last_login)

    def test_login_trailing_slash(self):
        response = self.client.post(
            "/api/auth/login/",
            {"username": "admin_auth_test", "password": "SecurePass123!"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)

    def test_login_wrong_password(self):
        response = self._login("admin_auth_test", "WrongPassword!")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data["detail"], "Invalid username or password")

    def test_login_unknown_user(self):
        response = self._login("nobody")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data["detail"], "Invalid username or password")

    def test_login_inactive_user(self):
        response = self._login("inactive_auth_test")
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_login_missing_fields_is_400(self):
        response = self.client.post("/api/auth/login", {"username": "admin_auth_test"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    # ========== BEARER TOKEN ==========

    def test_bearer_token_authenticates_requests(self):
        token = self._login("doctor_auth_test").data["token"]

        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
        response = client.get("/api/doctors")

        self.assertEqual(response.status_code, status.HTTP_200_OK)

    def test_garbage_token_is_401(self):
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION="Bearer not-a-jwt")
        response = client.get("/api/doctors")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    # ========== REFRESH / ME ==========

    def test_refresh_returns_new_access_token(self):
        refresh = self._login("admin_auth_test").data["refresh"]

        response = self.client.post("/api/auth/refresh", {"refresh": refresh}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(_decode(response.data["token"])["role"], "Admin")

    def test_refresh_invalid_token_is_400(self):
        response = self.client.post("/api/auth/refresh", {"refresh": "garbage"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_me_returns_doctor_id(self):
        client = APIClient()
        client.force_authenticate(user=self.doctor)
        response = client.get("/api/auth/me")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(
            response.data,
            {"id": self.doctor.id, "username": "doctor_auth_test", "role": "Doctor", "doctorId": self.profile.id},
        )

    def test_me_unauthenticated_is_401(self):
        response = self.client.get("/api/auth/me")
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)


class HealthTest(TestCase):
    databases = {"default"}

    def test_health_is_public(self):
        response = APIClient().get("/api/health")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "ok"})
