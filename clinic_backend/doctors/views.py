"""Doctor endpoints.

- DoctorListCreateView: list (optional ?search= / ?specialty=) and create
- DoctorDetailView: retrieve, update (204) and delete
- DoctorBySpecialtyView: substring match on specialty
- DoctorByUserView: profile linked to a login account (Doctor role)
- DoctorAppointmentsView: appointments of one doctor
"""

import logging

from rest_framework import generics, status
from rest_framework.exceptions import NotFound
from rest_framework.response import Response

from clinic_backend.appointments.models import Appointment
from clinic_backend.appointments.serializers import AppointmentSerializer
from clinic_backend.core.permissions import IsDoctor
from clinic_backend.core.utils import log_action, save_existing

from .models import Doctor
from .permissions import DoctorPermission
from .serializers import DoctorSerializer, DoctorWriteSerializer

logger = logging.getLogger(__name__)


class DoctorListCreateView(generics.ListCreateAPIView):
    """GET/POST /api/doctors"""

    permission_classes = [DoctorPermission]

    def get_queryset(self):
        qs = Doctor.objects.all()
        search = self.request.query_params.get('search')
        if search:
            qs = qs.filter(name__icontains=search)
        specialty = self.request.query_params.get('specialty')
        if specialty:
            qs = qs.filter(specialty__icontains=specialty)
        return qs

    def get_serializer_class(self):
        if self.request.method == 'POST':
            return DoctorWriteSerializer
        return DoctorSerializer

    def create(self, request, *args, **kwargs):
        write_serializer = self.get_serializer(data=request.data)
        write_serializer.is_valid(raise_exception=True)
        doctor = write_serializer.save()
        log_action(request.user, 'doctor_create', 'Doctor', doctor.id)

        read_serializer = DoctorSerializer(doctor)
        headers = self.get_success_headers(read_serializer.data)
        return Response(read_serializer.data, status=status.HTTP_201_CREATED, headers=headers)


class DoctorDetailView(generics.RetrieveUpdateDestroyAPIView):
    """GET/PUT/PATCH/DELETE /api/doctors/<pk>"""

    permission_classes = [DoctorPermission]
    queryset = Doctor.objects.all()

    def get_serializer_class(self):
        if self.request.method in ('PUT', 'PATCH'):
            return DoctorWriteSerializer
        return DoctorSerializer

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        doctor = self.get_object()

        serializer = DoctorWriteSerializer(doctor, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        save_existing(serializer)

        log_action(request.user, 'doctor_update', 'Doctor', doctor.id)
        return Response(status=status.HTTP_204_NO_CONTENT)

    def perform_destroy(self, instance):
        doctor_id = instance.id
        instance.delete()
        log_action(self.request.user, 'doctor_delete', 'Doctor', doctor_id)


class DoctorBySpecialtyView(generics.ListAPIView):
    """GET /api/doctors/specialty/<specialty>"""

    permission_classes = [DoctorPermission]
    serializer_class = DoctorSerializer

    def get_queryset(self):
        return Doctor.objects.filter(specialty__icontains=self.kwargs['specialty'])


class DoctorByUserView(generics.RetrieveAPIView):
    """GET /api/doctors/user/<user_id>

    Used by the client right after a doctor logs in to find their profile.
    """

    permission_classes = [IsDoctor]
    serializer_class = DoctorSerializer

    def get_object(self):
        user_id = self.kwargs['user_id']
        logger.info('Looking up doctor profile for user %s', user_id)
        doctor = Doctor.objects.filter(user_id=user_id).first()
        if doctor is None:
            logger.warning('No doctor profile linked to user %s', user_id)
            raise NotFound(f'No doctor found for user ID: {user_id}')
        return doctor


class DoctorAppointmentsView(generics.ListAPIView):
    """GET /api/doctors/<pk>/appointments"""

    permission_classes = [DoctorPermission]
    serializer_class = AppointmentSerializer

    def get_queryset(self):
        doctor_id = self.kwargs['pk']
        if not Doctor.objects.filter(pk=doctor_id).exists():
            raise NotFound(f'Doctor with ID {doctor_id} not found')
        return Appointment.objects.select_related('doctor', 'patient').filter(doctor_id=doctor_id)
