"""
Registration and login.
"""
from __future__ import annotations

import logging

from django.contrib.auth import authenticate
from django.db import IntegrityError, transaction

from care.exceptions import AuthError, ConflictError
from care.models import Role, User
from care.tokens import issue_token

logger = logging.getLogger(__name__)


def register(*, username: str, password: str, role: Role) -> tuple[User, str]:
    """Create an account and return it with a fresh token.

    The existence check gives the common case a clean 409; the unique
    constraint catches the concurrent one.
    """
    if User.objects.filter(username=username).exists():
        raise ConflictError('Username already exists')
    try:
        with transaction.atomic():
            user = User.objects.create_user(username=username, password=password, role=role)
    except IntegrityError as exc:
        raise ConflictError('Username already exists') from exc
    logger.info('registered user id=%s role=%s', user.id, user.role)
    return user, issue_token(user)


def login(request, *, username: str, password: str) -> tuple[User, str]:
    user = authenticate(request, username=username or None, password=password or None)
    if user is None:
        logger.warning('failed login for username=%r', username)
        raise AuthError()
    logger.info('user id=%s logged in', user.id)
    return user, issue_token(user)
