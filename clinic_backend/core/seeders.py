from django.contrib.auth import get_user_model
from django.db import transaction

from .models import AuditLog, Role

User = get_user_model()

# username, password, role, is_staff
SEED_USERS = [
    ("admin", "Admin123!", Role.ADMIN, True),
    ("doctorcapri", "Doctor123!", Role.DOCTOR, False),
]


def seed_core(flush: bool = False) -> dict:
    """
    Seeds the demo login accounts.

    Existing accounts are left untouched (passwords are not reset). With
    ``flush=True`` the audit trail and the demo accounts are removed first.
    """
    stats: dict[str, int] = {}

    with transaction.atomic():
        if flush:
            AuditLog.objects.all().delete()
            User.objects.filter(username__in=[u[0] for u in SEED_USERS]).delete()

        created = 0
        for username, password, role, is_staff in SEED_USERS:
            if User.objects.filter(username=username).exists():
                continue
            User.objects.create_user(
                username=username,
                password=password,
                role=role,
                is_staff=is_staff,
                is_superuser=is_staff,
            )
            created += 1
        stats["core_users"] = created

    return stats
