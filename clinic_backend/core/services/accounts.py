"""Account registration and credential checks."""

from __future__ import annotations

import logging

from django.contrib.auth import get_user_model
from django.db import transaction

from clinic_backend.core.models import Role

from .passwords import hash_password, verify_password

logger = logging.getLogger(__name__)

User = get_user_model()

DEFAULT_PWZ_NUMBER = 'TBD'
DEFAULT_SPECIALTY = 'General Medicine'
DEFAULT_WORK_HOURS = '9:00-17:00'


class RegistrationError(ValueError):
    """Registration rejected; the message is shown to the client as-is."""


def is_valid_role(role: str | None) -> bool:
    return role in Role.values


def register_user(
    *,
    username: str,
    password: str,
    role: str,
    name: str | None = None,
    pwz_number: str | None = None,
    specialty: str | None = None,
    email: str | None = None,
    phone_number: str | None = None,
):
    """Create a user; a ``Doctor`` registration also gets a linked profile.

    Raises ``RegistrationError`` for missing credentials, a taken username or
    an unknown role.
    """
    from clinic_backend.doctors.models import Doctor

    if not username or not password:
        raise RegistrationError('Username and password are required')

    if User.objects.filter(username=username).exists():
        raise RegistrationError('Username is already taken')

    if not is_valid_role(role):
        raise RegistrationError('Invalid role')

    with transaction.atomic():
        user = User(username=username, role=role, email=email or '')
        user.password = hash_password(password)
        user.save()

        if role == Role.DOCTOR:
            Doctor.objects.create(
                user=user,
                name=name or f'Dr. {username}',
                pwz_number=pwz_number or DEFAULT_PWZ_NUMBER,
                specialty=specialty or DEFAULT_SPECIALTY,
                work_hours=DEFAULT_WORK_HOURS,
                email=email or None,
                phone_number=phone_number or None,
            )

    logger.info('Registered user %s with role %s', username, role)
    return user


def authenticate_credentials(username: str, password: str):
    """Return the active user matching the credentials, or ``None``."""
    user = User.objects.filter(username=username).first()
    if user is None:
        logger.warning('Login failed: unknown user %r', username)
        # Same hashing cost as a known user with a wrong password.
        User().set_password(password)
        return None

    if not verify_password(password, user.password):
        logger.warning('Login failed: wrong password for %r', username)
        return None

    if not user.is_active:
        logger.warning('Login failed: inactive user %r', username)
        return None

    return user
