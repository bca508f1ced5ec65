from clinic_backend.core.models import Role
from clinic_backend.core.permissions import ALL_ROLES, RBACPermission


class AppointmentPermission(RBACPermission):
	"""RBAC for appointment endpoints.

	- Admin, Doctor: full access
	- User: read-only
	"""

	read_roles = ALL_ROLES
	write_roles = {Role.ADMIN, Role.DOCTOR}
