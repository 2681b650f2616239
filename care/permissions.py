"""
Role gates.
"""
from rest_framework.permissions import BasePermission

from .exceptions import ForbiddenError
from .models import Role


class HasRole(BasePermission):
    """Allow access only to identities holding ``role``.

    Subclasses set ``role``.  Unauthenticated requests fail here too, but
    DRF reports those as 401 before the role is considered.
    """
    role: Role
    message = ForbiddenError.default_detail

    def has_permission(self, request, view) -> bool:  # type: ignore[override]
        identity = getattr(request, "user", None)
        return bool(identity and identity.is_authenticated and getattr(identity, "role", None) == self.role)


class IsProviderRole(HasRole):
    """Allow access only to providers."""
    role = Role.PROVIDER
