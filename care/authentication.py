"""
Bearer token authentication.

Subclasses simplejwt's ``JWTAuthentication`` so header parsing and the
``WWW-Authenticate`` challenge stay the library's, while the resulting
``request.user`` is a stateless :class:`~care.tokens.Identity` instead of
a database row.
"""
from __future__ import annotations

from rest_framework.exceptions import AuthenticationFailed
from rest_framework_simplejwt.authentication import JWTAuthentication

from .tokens import verify_token


class BearerTokenAuthentication(JWTAuthentication):
    """``Authorization: Bearer <token>``.

    A missing header, another scheme, or ``Bearer`` with nothing after it
    count as no credentials; DRF then answers 401 ``No token`` for
    protected views.  A present but unverifiable token raises
    ``InvalidTokenError``.
    """

    def authenticate(self, request):
        header = self.get_header(request)
        if header is None:
            return None
        try:
            raw_token = self.get_raw_token(header)
        except AuthenticationFailed:
            return None
        if not raw_token:
            return None
        return verify_token(raw_token), raw_token
