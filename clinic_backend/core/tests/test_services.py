from __future__ import annotations

import time
from unittest.mock import patch

import jwt

from django.test import TestCase

from clinic_backend.core.models import Role, User
from clinic_backend.core.services import hash_password, issue_token, role_from_token, verify_password
from clinic_backend.core.services.accounts import authenticate_credentials


class PasswordServiceTest(TestCase):
    def test_hash_is_salted_bcrypt(self):
        first = hash_password("Admin123!")
        second = hash_password("Admin123!")

        self.assertTrue(first.startswith("bcrypt_sha256$"))
        self.assertNotEqual(first, second)
        self.assertTrue(verify_password("Admin123!", first))
        self.assertTrue(verify_password("Admin123!", second))

    def test_verify_rejects_wrong_password(self):
        encoded = hash_password("Admin123!")
        self.assertFalse(verify_password("admin123!", encoded))

    def test_verify_never_raises_on_bad_input(self):
        self.assertFalse(verify_password("", hash_password("x")))
        self.assertFalse(verify_password("x", ""))
        self.assertFalse(verify_password("x", "!unusable"))

    def test_hash_rejects_empty(self):
        with self.assertRaises(ValueError):
            hash_password("")


class TokenServiceTest(TestCase):
    databases = {"default"}

    def setUp(self):
        self.user = User.objects.create_user(username="token_test", password="DummyPass123!", role=Role.DOCTOR)

    def test_role_round_trips_through_token(self):
        tokens = issue_token(self.user)
        self.assertEqual(role_from_token(tokens["access"]), "Doctor")

    def test_token_signed_with_other_key_has_no_role(self):
        forged = jwt.encode(
            {
                "token_type": "access",
                "user_id": self.user.id,
                "role": "Admin",
                "jti": "forged",
                "exp": int(time.time()) + 600,
            },
            "a-different-signing-key-of-sufficient-length-0123456789",
            algorithm="HS256",
        )
        self.assertIsNone(role_from_token(forged))

    def test_refresh_token_is_not_an_access_token(self):
        tokens = issue_token(self.user)
        self.assertIsNone(role_from_token(tokens["refresh"]))


class AuthenticateCredentialsTest(TestCase):
    databases = {"default"}

    def setUp(self):
        self.user = User.objects.create_user(username="cred_test", password="DummyPass123!", role=Role.USER)

    def test_valid_credentials(self):
        self.assertEqual(authenticate_credentials("cred_test", "DummyPass123!"), self.user)

    def test_invalid_credentials(self):
        self.assertIsNone(authenticate_credentials("cred_test", "nope"))
        self.assertIsNone(authenticate_credentials("ghost", "DummyPass123!"))

    def test_unknown_user_still_runs_the_hasher(self):
        with patch.object(User, "set_password") as set_password:
            self.assertIsNone(authenticate_credentials("ghost", "DummyPass123!"))

        set_password.assert_called_once_with("DummyPass123!")
