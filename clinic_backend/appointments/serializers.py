from rest_framework import serializers

from clinic_backend.core.serializers import ForcedUpdateMixin

from .models import Appointment, AppointmentStatus


class AppointmentSerializer(serializers.ModelSerializer):
	"""Read DTO with the doctor's and patient's display names flattened in."""

	doctorId = serializers.IntegerField(source='doctor_id', read_only=True)
	patientId = serializers.IntegerField(source='patient_id', read_only=True)
	doctorName = serializers.CharField(source='doctor.name', read_only=True)
	patientName = serializers.CharField(source='patient.name', read_only=True)
	appointmentDate = serializers.DateTimeField(source='appointment_date', read_only=True)

	class Meta:
		model = Appointment
		fields = [
			'id',
			'doctorId',
			'patientId',
			'doctorName',
			'patientName',
			'appointmentDate',
			'status',
			'notes',
		]
		read_only_fields = fields


class AppointmentCreateSerializer(serializers.Serializer):
	"""Booking body.

	Ids are not range-checked here: a missing or unknown id is rejected by the
	booking service as an invalid reference.
	"""

	appointmentDate = serializers.DateTimeField()
	notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)
	doctorId = serializers.IntegerField(default=0)
	patientId = serializers.IntegerField(default=0)


class AppointmentUpdateSerializer(ForcedUpdateMixin, serializers.ModelSerializer):
	"""Reschedule, change status or edit notes; doctor and patient are fixed."""

	appointmentDate = serializers.DateTimeField(source='appointment_date')
	status = serializers.ChoiceField(choices=AppointmentStatus.choices, required=False)
	notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)

	class Meta:
		model = Appointment
		fields = ['appointmentDate', 'status', 'notes']
