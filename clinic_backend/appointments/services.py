"""
Appointment booking.

Views call ``book_appointment`` instead of saving a serializer directly so
that reference checks and the initial status live in one place.
"""

from __future__ import annotations

import logging
from datetime import datetime

from django.db import transaction

from clinic_backend.core.exceptions import InvalidReference
from clinic_backend.doctors.models import Doctor
from clinic_backend.patients.models import Patient

from .models import Appointment, AppointmentStatus

logger = logging.getLogger(__name__)

INVALID_REFERENCE_MESSAGE = 'Invalid doctor or patient ID'


def book_appointment(
	*,
	doctor_id: int,
	patient_id: int,
	appointment_date: datetime,
	notes: str | None = None,
) -> Appointment:
	"""
	Create a new appointment in ``Scheduled`` state.

	Raises:
		InvalidReference: if the doctor or the patient does not exist
	"""
	with transaction.atomic():
		doctor = Doctor.objects.filter(pk=doctor_id).first()
		if doctor is None:
			logger.info('Booking rejected: doctor %s does not exist', doctor_id)
			raise InvalidReference(INVALID_REFERENCE_MESSAGE, field='doctorId', value=doctor_id)

		patient = Patient.objects.filter(pk=patient_id).first()
		if patient is None:
			logger.info('Booking rejected: patient %s does not exist', patient_id)
			raise InvalidReference(INVALID_REFERENCE_MESSAGE, field='patientId', value=patient_id)

		return Appointment.objects.create(
			doctor=doctor,
			patient=patient,
			appointment_date=appointment_date,
			status=AppointmentStatus.SCHEDULED,
			notes=notes,
		)
