from django.contrib.auth import get_user_model
from django.db import transaction

from .models import Doctor

User = get_user_model()

SEED_DOCTOR_EMAIL = "doctor@example.com"


def seed_doctors(flush: bool = False) -> dict:
    """Creates Dr. Capri and links the profile to the ``doctorcapri`` account.

    Flushing deletes the demo profile together with its appointments.
    """
    stats: dict[str, int] = {"doctors": 0}

    with transaction.atomic():
        if flush:
            Doctor.objects.filter(email=SEED_DOCTOR_EMAIL).delete()

        user = User.objects.filter(username="doctorcapri").first()
        if user is None or Doctor.objects.filter(user=user).exists():
            return stats

        Doctor.objects.create(
            name="Dr. Capri",
            pwz_number="12345",
            specialty="Cardiology",
            work_hours="9:00-17:00",
            phone_number="123-456-7890",
            email=SEED_DOCTOR_EMAIL,
            user=user,
        )
        stats["doctors"] = 1

    return stats
