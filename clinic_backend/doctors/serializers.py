"""Serializers for doctor profiles.

Read serializers produce the camelCase DTO returned by the API; write
serializers accept the create/update bodies and map them onto model fields.
"""

from rest_framework import serializers

from clinic_backend.core.serializers import ForcedUpdateMixin

from .models import Doctor


class DoctorSerializer(serializers.ModelSerializer):
    pwzNumber = serializers.CharField(source='pwz_number', read_only=True)
    workHours = serializers.CharField(source='work_hours', read_only=True)
    phoneNumber = serializers.CharField(source='phone_number', read_only=True)
    userId = serializers.IntegerField(source='user_id', read_only=True)

    class Meta:
        model = Doctor
        fields = [
            'id',
            'name',
            'pwzNumber',
            'specialty',
            'workHours',
            'phoneNumber',
            'email',
            'userId',
        ]
        read_only_fields = fields


class DoctorWriteSerializer(ForcedUpdateMixin, serializers.ModelSerializer):
    """Create/update body.

    ``pwzNumber`` and ``workHours`` are optional; omitted values keep the
    model defaults on create and the stored values on update.
    """

    pwzNumber = serializers.CharField(source='pwz_number', required=False, max_length=100)
    workHours = serializers.CharField(source='work_hours', required=False, max_length=100)
    phoneNumber = serializers.CharField(
        source='phone_number',
        required=False,
        allow_blank=True,
        allow_null=True,
        max_length=50,
    )
    email = serializers.EmailField(required=False, allow_blank=True, allow_null=True, max_length=255)

    class Meta:
        model = Doctor
        fields = ['name', 'specialty', 'pwzNumber', 'workHours', 'phoneNumber', 'email']
        extra_kwargs = {
            'name': {'max_length': 100},
            'specialty': {'max_length': 100},
        }
