"""
Signed identity claims.

An access token carries ``id``, ``role`` and ``username`` plus an expiry
and is signed with ``settings.JWT_SECRET``.  Verification is purely
cryptographic; nothing is looked up in the database, so a token stays
valid for its whole lifetime even if the account changes or is deleted.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import AccessToken

from .exceptions import InvalidTokenError
from .models import Role, User


@dataclass(frozen=True)
class Identity:
    """The authenticated caller, as stated by a verified token."""
    id: int
    role: Role
    username: str

    # Lets DRF's IsAuthenticated treat an Identity like a logged-in user
    is_authenticated = True


def issue_token(user: User) -> str:
    token = AccessToken.for_user(user)
    token['role'] = str(user.role)
    token['username'] = user.username
    return str(token)


def identity_from_claims(claims: Mapping[str, Any]) -> Identity:
    try:
        return Identity(
            id=int(claims['id']),
            role=Role(claims['role']),
            username=str(claims['username']),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise InvalidTokenError() from exc


def verify_token(raw: str | bytes) -> Identity:
    """Return the identity in ``raw`` or raise :class:`InvalidTokenError`.

    Bad signatures, expired tokens, tokens of another type and tokens
    missing a claim are all rejected the same way.
    """
    try:
        token = AccessToken(raw)
    except TokenError as exc:
        raise InvalidTokenError() from exc
    return identity_from_claims(token.payload)
