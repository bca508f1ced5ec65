from datetime import timedelta

from django.db import transaction
from django.utils import timezone

from clinic_backend.patients.models import Patient

from .models import MedicalRecord

# patient e-mail, days ago, diagnosis, treatment, notes
SEED_RECORDS = [
    (
        "alice.brown@email.com",
        30,
        "Hypertension",
        "Prescribed blood pressure medication",
        "Patient needs to monitor blood pressure daily",
    ),
    (
        "bob.wilson@email.com",
        15,
        "Common cold",
        "Rest and fluids",
        "Follow up if symptoms persist",
    ),
]


def seed_medical() -> dict:
    stats: dict[str, int] = {"medical_records": 0}

    with transaction.atomic():
        now = timezone.now()
        for email, days_ago, diagnosis, treatment, notes in SEED_RECORDS:
            patient = Patient.objects.filter(email=email).first()
            if patient is None:
                continue
            if MedicalRecord.objects.filter(patient=patient, diagnosis=diagnosis).exists():
                continue
            MedicalRecord.objects.create(
                patient=patient,
                record_date=now - timedelta(days=days_ago),
                diagnosis=diagnosis,
                treatment=treatment,
                notes=notes,
            )
            stats["medical_records"] += 1

    return stats
