"""Password hashing.

Thin wrappers over Django's hasher framework. With the project settings the
first entry of ``PASSWORD_HASHERS`` is ``BCryptSHA256PasswordHasher`` (backed
by the ``bcrypt`` package), so every new hash is a bcrypt hash.
"""

from django.contrib.auth.hashers import check_password, is_password_usable, make_password


def hash_password(raw_password: str) -> str:
    """Return an encoded bcrypt hash for ``raw_password``."""
    if not raw_password:
        raise ValueError('password must not be empty')
    return make_password(raw_password)


def verify_password(raw_password: str, encoded: str) -> bool:
    """Hash-and-compare ``raw_password`` against ``encoded``.

    Never raises: empty input or an unusable hash simply fails the check.
    """
    if not raw_password or not encoded or not is_password_usable(encoded):
        return False
    return check_password(raw_password, encoded)
