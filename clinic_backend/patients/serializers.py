from rest_framework import serializers

from clinic_backend.core.serializers import ForcedUpdateMixin

from .models import Patient

# Browser clients send dates of birth either as plain dates or as the
# midnight timestamp produced by a date picker.
DATE_OF_BIRTH_INPUT_FORMATS = [
    'iso-8601',
    '%Y-%m-%dT%H:%M:%S',
    '%Y-%m-%dT%H:%M:%S.%f',
    '%Y-%m-%dT%H:%M:%SZ',
    '%Y-%m-%dT%H:%M:%S.%fZ',
]


class PatientReadSerializer(serializers.ModelSerializer):
    dateOfBirth = serializers.DateField(source='date_of_birth', read_only=True)
    phoneNumber = serializers.CharField(source='phone_number', read_only=True)

    class Meta:
        model = Patient
        fields = ['id', 'name', 'dateOfBirth', 'gender', 'phoneNumber', 'email']
        read_only_fields = fields


class PatientWriteSerializer(ForcedUpdateMixin, serializers.ModelSerializer):
    dateOfBirth = serializers.DateField(source='date_of_birth', input_formats=DATE_OF_BIRTH_INPUT_FORMATS)
    phoneNumber = serializers.CharField(
        source='phone_number',
        required=False,
        allow_blank=True,
        allow_null=True,
        max_length=50,
    )
    email = serializers.EmailField(required=False, allow_blank=True, allow_null=True, max_length=255)

    class Meta:
        model = Patient
        fields = ['name', 'dateOfBirth', 'gender', 'phoneNumber', 'email']
        extra_kwargs = {
            'name': {'max_length': 100},
            'gender': {'max_length': 20},
        }

    def validate_name(self, value):
        value = (value or '').strip()
        if not value:
            raise serializers.ValidationError('This field may not be blank.')
        return value
