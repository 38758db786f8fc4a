# store/permissions.py
from rest_framework.permissions import BasePermission

from .authentication import TokenIdentity


class IsAuthenticatedIdentity(BasePermission):
    """Exige um token válido."""

    def has_permission(self, request, view):
        return isinstance(request.user, TokenIdentity)


class OnlyAdmin(IsAuthenticatedIdentity):
    """Token válido + papel ADMIN."""

    def has_permission(self, request, view):
        return super().has_permission(request, view) and request.user.is_admin
