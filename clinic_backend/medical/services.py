from __future__ import annotations

import logging

from django.utils import timezone

from clinic_backend.core.exceptions import InvalidReference
from clinic_backend.patients.models import Patient

from .models import MedicalRecord

logger = logging.getLogger(__name__)


def create_medical_record(
    *,
    patient_id: int,
    diagnosis: str,
    treatment: str,
    notes: str | None = None,
) -> MedicalRecord:
    """Add a record to a patient's history, stamped with the current time.

    Raises ``InvalidReference`` when the patient does not exist.
    """
    patient = Patient.objects.filter(pk=patient_id).first()
    if patient is None:
        logger.info('Medical record rejected: patient %s does not exist', patient_id)
        raise InvalidReference('Invalid patient ID', field='patientId', value=patient_id)

    return MedicalRecord.objects.create(
        patient=patient,
        record_date=timezone.now(),
        diagnosis=diagnosis,
        treatment=treatment,
        notes=notes,
    )
