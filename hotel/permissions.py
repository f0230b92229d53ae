from rest_framework.permissions import SAFE_METHODS, BasePermission

from user.policies import can_create_hotel


class IsOwnerRoleOrReadOnly(BasePermission):
    """Allow read-only access for everyone, write access only for hotel owners."""

    def has_permission(self, request, view):
        """Return True for SAFE methods, otherwise require the owner role."""
        if request.method in SAFE_METHODS:
            return True
        return bool(can_create_hotel(getattr(request.user, "role", None)))
