"""Stateless authentication services: password hashing and token issuance."""

from .passwords import hash_password, verify_password
from .tokens import issue_token, role_from_token

__all__ = [
    'hash_password',
    'verify_password',
    'issue_token',
    'role_from_token',
]
