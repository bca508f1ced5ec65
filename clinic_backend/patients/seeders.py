from datetime import date

from django.db import transaction

from .models import Patient

SEED_PATIENTS = [
    {
        "name": "Alice Brown",
        "date_of_birth": date(1985, 5, 15),
        "gender": "Female",
        "phone_number": "123-456-7892",
        "email": "alice.brown@email.com",
    },
    {
        "name": "Bob Wilson",
        "date_of_birth": date(1990, 8, 20),
        "gender": "Male",
        "phone_number": "123-456-7893",
        "email": "bob.wilson@email.com",
    },
]


def seed_patients(flush: bool = False) -> dict:
    """
    Seeds the demo patients, matched by e-mail.

    Flushing removes the demo patients; their appointments and medical
    records go with them.
    """
    stats: dict[str, int] = {}

    with transaction.atomic():
        emails = [p["email"] for p in SEED_PATIENTS]
        if flush:
            Patient.objects.filter(email__in=emails).delete()

        created = 0
        for data in SEED_PATIENTS:
            _patient, was_created = Patient.objects.get_or_create(email=data["email"], defaults=data)
            created += int(was_created)
        stats["patients"] = created

    return stats
