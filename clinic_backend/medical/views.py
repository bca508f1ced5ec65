from rest_framework import generics, status
from rest_framework.response import Response

from clinic_backend.core.exceptions import InvalidReference
from clinic_backend.core.utils import log_action, save_existing

from .models import MedicalRecord
from .permissions import MedicalRecordPermission
from .serializers import (
    MedicalRecordCreateSerializer,
    MedicalRecordSerializer,
    MedicalRecordUpdateSerializer,
)
from .services import create_medical_record


class MedicalRecordListCreateView(generics.ListCreateAPIView):
    """List all medical records (newest first) or add one."""

    permission_classes = [MedicalRecordPermission]

    def get_queryset(self):
        return MedicalRecord.objects.select_related('patient')

    def get_serializer_class(self):
        if self.request.method == 'POST':
            return MedicalRecordCreateSerializer
        return MedicalRecordSerializer

    def create(self, request, *args, **kwargs):
        write_serializer = self.get_serializer(data=request.data)
        write_serializer.is_valid(raise_exception=True)
        data = write_serializer.validated_data

        try:
            record = create_medical_record(
                patient_id=data['patientId'],
                diagnosis=data['diagnosis'],
                treatment=data['treatment'],
                notes=data.get('notes'),
            )
        except InvalidReference as e:
            return Response(e.to_dict(), status=status.HTTP_400_BAD_REQUEST)

        log_action(
            request.user,
            'medical_record_create',
            'MedicalRecord',
            record.id,
            meta={'patient_id': record.patient_id},
        )

        read_serializer = MedicalRecordSerializer(record)
        headers = self.get_success_headers(read_serializer.data)
        return Response(read_serializer.data, status=status.HTTP_201_CREATED, headers=headers)


class MedicalRecordDetailView(generics.RetrieveUpdateDestroyAPIView):
    """Retrieve, update or delete a medical record."""

    permission_classes = [MedicalRecordPermission]
    queryset = MedicalRecord.objects.select_related('patient')

    def get_serializer_class(self):
        if self.request.method in ('PUT', 'PATCH'):
            return MedicalRecordUpdateSerializer
        return MedicalRecordSerializer

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        record = self.get_object()

        serializer = MedicalRecordUpdateSerializer(record, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        save_existing(serializer)

        log_action(request.user, 'medical_record_update', 'MedicalRecord', record.id)
        return Response(status=status.HTTP_204_NO_CONTENT)

    def perform_destroy(self, instance):
        record_id = instance.id
        instance.delete()
        log_action(self.request.user, 'medical_record_delete', 'MedicalRecord', record_id)


class PatientMedicalRecordsView(generics.ListAPIView):
    """Medical history of one patient, newest first."""

    permission_classes = [MedicalRecordPermission]
    serializer_class = MedicalRecordSerializer

    def get_queryset(self):
        return MedicalRecord.objects.select_related('patient').filter(
            patient_id=self.kwargs['patient_id'],
        )
