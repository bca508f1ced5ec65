"""Appointment endpoints.

- AppointmentListCreateView: list (?doctorId= / ?patientId= / ?status=) and book
- AppointmentDetailView: retrieve, update (204) and delete
- DoctorScheduleView / PatientAppointmentsView: appointments of one party
"""

import logging

from rest_framework import generics, status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response

from clinic_backend.core.exceptions import InvalidReference
from clinic_backend.core.utils import log_action, save_existing

from .models import Appointment, AppointmentStatus
from .permissions import AppointmentPermission
from .serializers import (
	AppointmentCreateSerializer,
	AppointmentSerializer,
	AppointmentUpdateSerializer,
)
from .services import book_appointment

logger = logging.getLogger(__name__)


def _int_param(request, name):
	raw = request.query_params.get(name)
	if raw in (None, ''):
		return None
	try:
		return int(raw)
	except (TypeError, ValueError):
		raise ValidationError({name: 'A valid integer is required.'})


class AppointmentListCreateView(generics.ListCreateAPIView):
	permission_classes = [AppointmentPermission]

	def get_queryset(self):
		qs = Appointment.objects.select_related('doctor', 'patient')

		doctor_id = _int_param(self.request, 'doctorId')
		if doctor_id is not None:
			qs = qs.filter(doctor_id=doctor_id)

		patient_id = _int_param(self.request, 'patientId')
		if patient_id is not None:
			qs = qs.filter(patient_id=patient_id)

		status_param = self.request.query_params.get('status')
		if status_param:
			if status_param not in AppointmentStatus.values:
				raise ValidationError({'status': f'Must be one of {", ".join(AppointmentStatus.values)}.'})
			qs = qs.filter(status=status_param)

		return qs

	def get_serializer_class(self):
		if self.request.method == 'POST':
			return AppointmentCreateSerializer
		return AppointmentSerializer

	def create(self, request, *args, **kwargs):
		write_serializer = self.get_serializer(data=request.data)
		write_serializer.is_valid(raise_exception=True)
		data = write_serializer.validated_data

		try:
			appointment = book_appointment(
				doctor_id=data['doctorId'],
				patient_id=data['patientId'],
				appointment_date=data['appointmentDate'],
				notes=data.get('notes'),
			)
		except InvalidReference as e:
			return Response(e.to_dict(), status=status.HTTP_400_BAD_REQUEST)

		log_action(
			request.user,
			'appointment_create',
			'Appointment',
			appointment.id,
			meta={'doctor_id': appointment.doctor_id, 'patient_id': appointment.patient_id},
		)

		read_serializer = AppointmentSerializer(appointment)
		headers = self.get_success_headers(read_serializer.data)
		return Response(read_serializer.data, status=status.HTTP_201_CREATED, headers=headers)


class AppointmentDetailView(generics.RetrieveUpdateDestroyAPIView):
	permission_classes = [AppointmentPermission]
	queryset = Appointment.objects.select_related('doctor', 'patient')

	def get_serializer_class(self):
		if self.request.method in ('PUT', 'PATCH'):
			return AppointmentUpdateSerializer
		return AppointmentSerializer

	def update(self, request, *args, **kwargs):
		partial = kwargs.pop('partial', False)
		appointment = self.get_object()

		serializer = AppointmentUpdateSerializer(appointment, data=request.data, partial=partial)
		serializer.is_valid(raise_exception=True)
		save_existing(serializer)

		log_action(
			request.user,
			'appointment_update',
			'Appointment',
			appointment.id,
			meta={'status': appointment.status},
		)
		return Response(status=status.HTTP_204_NO_CONTENT)

	def perform_destroy(self, instance):
		appointment_id = instance.id
		instance.delete()
		log_action(self.request.user, 'appointment_delete', 'Appointment', appointment_id)


class DoctorScheduleView(generics.ListAPIView):
	"""GET /api/appointments/doctor/<doctor_id>"""

	permission_classes = [AppointmentPermission]
	serializer_class = AppointmentSerializer

	def get_queryset(self):
		return Appointment.objects.select_related('doctor', 'patient').filter(
			doctor_id=self.kwargs['doctor_id'],
		)


class PatientAppointmentsView(generics.ListAPIView):
	"""GET /api/appointments/patient/<patient_id>"""

	permission_classes = [AppointmentPermission]
	serializer_class = AppointmentSerializer

	def get_queryset(self):
		return Appointment.objects.select_related('doctor', 'patient').filter(
			patient_id=self.kwargs['patient_id'],
		)
