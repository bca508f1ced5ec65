from datetime import timedelta

from django.db import transaction
from django.utils import timezone

from clinic_backend.doctors.models import Doctor
from clinic_backend.patients.models import Patient

from .models import Appointment, AppointmentStatus

# patient e-mail, days from now, notes
SEED_APPOINTMENTS = [
	("alice.brown@email.com", 7, "Regular checkup"),
	("bob.wilson@email.com", 14, "Follow-up appointment"),
]


def seed_appointments() -> dict:
	"""Books Dr. Capri's two demo appointments unless they already exist."""
	stats: dict[str, int] = {"appointments": 0}

	with transaction.atomic():
		doctor = Doctor.objects.filter(user__username="doctorcapri").first()
		if doctor is None:
			return stats

		now = timezone.now()
		for email, days, notes in SEED_APPOINTMENTS:
			patient = Patient.objects.filter(email=email).first()
			if patient is None:
				continue
			if Appointment.objects.filter(doctor=doctor, patient=patient, notes=notes).exists():
				continue
			Appointment.objects.create(
				doctor=doctor,
				patient=patient,
				appointment_date=now + timedelta(days=days),
				status=AppointmentStatus.SCHEDULED,
				notes=notes,
			)
			stats["appointments"] += 1

	return stats
