"""JWT issuance and role-claim extraction (SimpleJWT)."""

from __future__ import annotations

import logging

from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import AccessToken, RefreshToken

logger = logging.getLogger(__name__)

ROLE_CLAIM = 'role'


def issue_token(user) -> dict[str, str]:
    """Issue an access/refresh pair for ``user``.

    Both tokens carry ``user_id`` (SimpleJWT default) plus ``id``,
    ``username`` and ``role`` so the browser client can decode its
    identity without another round-trip.
    """
    refresh = RefreshToken.for_user(user)
    refresh['id'] = user.id
    refresh['username'] = user.username
    refresh[ROLE_CLAIM] = getattr(user, 'role', None)

    # Claims set on the refresh token are copied into the access token.
    access = refresh.access_token

    return {
        'access': str(access),
        'refresh': str(refresh),
    }


def role_from_token(raw_token: str) -> str | None:
    """Verify ``raw_token`` and return its role claim, or ``None``."""
    try:
        token = AccessToken(raw_token)
    except TokenError as exc:
        logger.debug('Rejected token while reading role claim: %s', exc)
        return None
    return token.get(ROLE_CLAIM)
