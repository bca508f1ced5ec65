from rest_framework import serializers

from clinic_backend.core.serializers import ForcedUpdateMixin

from .models import MedicalRecord


class MedicalRecordSerializer(serializers.ModelSerializer):
    recordDate = serializers.DateTimeField(source='record_date', read_only=True)
    patientId = serializers.IntegerField(source='patient_id', read_only=True)
    patientName = serializers.CharField(source='patient.name', read_only=True)

    class Meta:
        model = MedicalRecord
        fields = [
            'id',
            'recordDate',
            'diagnosis',
            'treatment',
            'notes',
            'patientId',
            'patientName',
        ]
        read_only_fields = fields


class MedicalRecordCreateSerializer(serializers.Serializer):
    diagnosis = serializers.CharField()
    treatment = serializers.CharField()
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    patientId = serializers.IntegerField(default=0)


class MedicalRecordUpdateSerializer(ForcedUpdateMixin, serializers.ModelSerializer):
    """Only the clinical text can change; patient and record date are fixed."""

    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)

    class Meta:
        model = MedicalRecord
        fields = ['diagnosis', 'treatment', 'notes']
