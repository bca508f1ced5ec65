"""Core permissions for RBAC (Role-Based Access Control).

Endpoints declare which roles may read, write and delete through
``read_roles`` / ``write_roles`` / ``delete_roles`` on an ``RBACPermission``
subclass. The role is the ``role`` claim carried by the bearer token, stored
on the authenticated ``User``.

Roles: Admin, Doctor, User
"""

from rest_framework.permissions import SAFE_METHODS, BasePermission

from clinic_backend.core.models import Role

ALL_ROLES = frozenset({Role.ADMIN, Role.DOCTOR, Role.USER})


class RBACPermission(BasePermission):
    """Base class for RBAC permissions with read_roles/write_roles pattern.

    Subclasses should define:
    - read_roles: roles that can perform GET/HEAD/OPTIONS
    - write_roles: roles that can perform POST/PUT/PATCH
    - delete_roles: roles that can perform DELETE (defaults to write_roles)

    Example:
        class MyPermission(RBACPermission):
            read_roles = ALL_ROLES
            write_roles = {Role.ADMIN, Role.DOCTOR}
            delete_roles = {Role.ADMIN}
    """

    read_roles: frozenset | set = frozenset()
    write_roles: frozenset | set = frozenset()
    delete_roles: frozenset | set | None = None

    def _role_name(self, request):
        user = getattr(request, "user", None)
        return getattr(user, "role", None)

    def allowed_roles(self, method: str):
        if method in SAFE_METHODS:
            return self.read_roles
        if method == "DELETE" and self.delete_roles is not None:
            return self.delete_roles
        return self.write_roles

    def has_permission(self, request, view):
        user = getattr(request, "user", None)
        if not user or not user.is_authenticated:
            return False

        role_name = self._role_name(request)
        if not role_name:
            return False

        return role_name in self.allowed_roles(request.method)


class IsAdmin(RBACPermission):
    """Admin only, for every method."""

    read_roles = {Role.ADMIN}
    write_roles = {Role.ADMIN}


class IsDoctor(RBACPermission):
    """Doctor only, for every method."""

    read_roles = {Role.DOCTOR}
    write_roles = {Role.DOCTOR}
