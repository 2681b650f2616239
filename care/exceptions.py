"""
API error types and the unified exception handler.

Every failure leaves the API as::

    {"ok": false, "error": {"code": "...", "message": "..."}}

Validation failures add a ``fields`` mapping with per-field messages.
Unexpected exceptions are logged server side and reported with a generic
message only.
"""
from __future__ import annotations

import logging

from django.core.exceptions import PermissionDenied as DjangoPermissionDenied
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.response import Response

logger = logging.getLogger(__name__)


class ValidationError(exceptions.APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Invalid input.'
    default_code = 'validation_error'


class AuthError(exceptions.APIException):
    """Bad credentials at login.  Never says which half was wrong."""
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = 'Invalid credentials'
    default_code = 'auth_error'


class NoTokenError(exceptions.NotAuthenticated):
    default_detail = 'No token'
    default_code = 'no_token'


class InvalidTokenError(exceptions.AuthenticationFailed):
    default_detail = 'Invalid token'
    default_code = 'invalid_token'


class ForbiddenError(exceptions.PermissionDenied):
    default_detail = 'Forbidden'
    default_code = 'forbidden'


class ConflictError(exceptions.APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'Conflict'
    default_code = 'conflict'


class InternalError(exceptions.APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = 'Internal server error'
    default_code = 'internal_error'


def _replace(old, new):
    # keep the WWW-Authenticate challenge DRF attached to the original
    auth_header = getattr(old, 'auth_header', None)
    if auth_header:
        new.auth_header = auth_header
    return new


def _translate(exc):
    """Map framework exceptions onto the project's error types."""
    if isinstance(exc, Http404):
        return exceptions.NotFound()
    if isinstance(exc, DjangoPermissionDenied):
        return ForbiddenError()
    if isinstance(exc, exceptions.NotAuthenticated) and not isinstance(exc, NoTokenError):
        return _replace(exc, NoTokenError())
    if isinstance(exc, exceptions.AuthenticationFailed) and not isinstance(exc, InvalidTokenError):
        return _replace(exc, InvalidTokenError())
    if isinstance(exc, exceptions.PermissionDenied) and not isinstance(exc, ForbiddenError):
        return ForbiddenError()
    return exc


def _flatten(detail) -> str:
    if isinstance(detail, dict):
        parts = []
        for field, value in detail.items():
            text = _flatten(value)
            parts.append(text if field in ('non_field_errors', 'detail') else f'{field}: {text}')
        return '; '.join(parts)
    if isinstance(detail, list):
        return ' '.join(_flatten(item) for item in detail)
    return str(detail)


def api_exception_handler(exc, context):
    # rest_framework.views imports the authentication classes, which import
    # this module, so the default handler is resolved at call time.
    from rest_framework.views import exception_handler as drf_exception_handler

    exc = _translate(exc)
    resp = drf_exception_handler(exc, context)
    if resp is None:
        view = context.get('view')
        logger.error('Unhandled error in %s', type(view).__name__ if view else 'view', exc_info=exc)
        err = InternalError()
        return Response(
            {'ok': False, 'error': {'code': err.default_code, 'message': str(err.detail)}},
            status=err.status_code,
        )

    error: dict[str, object]
    if isinstance(exc, exceptions.ValidationError):
        error = {
            'code': ValidationError.default_code,
            'message': _flatten(exc.detail),
            'fields': exc.detail if isinstance(exc.detail, dict) else {},
        }
    else:
        error = {'code': exc.default_code, 'message': _flatten(exc.detail)}
    resp.data = {'ok': False, 'error': error}
    return resp
