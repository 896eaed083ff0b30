from rest_framework import permissions

from . import auth
from .storage import SessionKeyValueStore


class IsMeetAdmin(permissions.BasePermission):
    """Allow writes only for sessions that passed the admin login."""

    message = "Admin login required."

    def has_permission(self, request, view):
        return auth.is_authenticated(SessionKeyValueStore(request.session))


class IsMeetAdminOrReadOnly(IsMeetAdmin):
    def has_permission(self, request, view):
        if request.method in permissions.SAFE_METHODS:
            return True
        return super().has_permission(request, view)
