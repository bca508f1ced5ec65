from django.db import models


class MedicalRecord(models.Model):
    """One diagnosis/treatment entry in a patient's medical history."""

    patient = models.ForeignKey(
        'patients.Patient',
        on_delete=models.CASCADE,
        related_name='medical_records',
    )
    record_date = models.DateTimeField(db_index=True)
    diagnosis = models.TextField()
    treatment = models.TextField()
    notes = models.TextField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-record_date', '-id']
        verbose_name = 'Medical record'
        verbose_name_plural = 'Medical records'

    def __str__(self) -> str:
        return f"{self.patient} {self.record_date:%Y-%m-%d}: {self.diagnosis}"
