from clinic_backend.core.models import Role
from clinic_backend.core.permissions import ALL_ROLES, RBACPermission


class PatientPermission(RBACPermission):
    """RBAC for Patient endpoints.

    - Admin: full access
    - Doctor: read + create/update
    - User: read-only
    """

    read_roles = ALL_ROLES
    write_roles = {Role.ADMIN, Role.DOCTOR}
    delete_roles = {Role.ADMIN}
