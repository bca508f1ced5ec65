from django.db import models


class AppointmentStatus(models.TextChoices):
	SCHEDULED = 'Scheduled', 'Scheduled'
	COMPLETED = 'Completed', 'Completed'
	CANCELLED = 'Cancelled', 'Cancelled'


class Appointment(models.Model):
	doctor = models.ForeignKey(
		'doctors.Doctor',
		on_delete=models.CASCADE,
		related_name='appointments',
	)
	patient = models.ForeignKey(
		'patients.Patient',
		on_delete=models.CASCADE,
		related_name='appointments',
	)
	appointment_date = models.DateTimeField(db_index=True)
	status = models.CharField(
		max_length=20,
		choices=AppointmentStatus.choices,
		default=AppointmentStatus.SCHEDULED,
		db_index=True,
	)
	notes = models.TextField(null=True, blank=True)
	created_at = models.DateTimeField(auto_now_add=True)
	updated_at = models.DateTimeField(auto_now=True)

	class Meta:
		ordering = ['appointment_date', 'id']
		verbose_name = 'Appointment'
		verbose_name_plural = 'Appointments'

	def __str__(self):
		return f"{self.appointment_date:%Y-%m-%d %H:%M} {self.patient} / {self.doctor} ({self.status})"
