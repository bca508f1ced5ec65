from clinic_backend.core.models import Role
from clinic_backend.core.permissions import ALL_ROLES, RBACPermission


class DoctorPermission(RBACPermission):
    """RBAC for doctor endpoints.

    - Admin: full access
    - Doctor, User: read-only
    """

    read_roles = ALL_ROLES
    write_roles = {Role.ADMIN}
