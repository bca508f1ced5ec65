from __future__ import annotations

from unittest.mock import patch

from django.db import DatabaseError
from django.test import TestCase

from rest_framework.exceptions import NotFound

from clinic_backend.core.utils import save_existing
from clinic_backend.doctors.models import Doctor
from clinic_backend.doctors.serializers import DoctorWriteSerializer


class SaveExistingTest(TestCase):
    """Updates never resurrect a row that was deleted after it was loaded."""

    databases = {"default"}

    def setUp(self):
        self.doctor = Doctor.objects.create(name="Dr. Capri", specialty="Cardiology")

    def _serializer(self):
        serializer = DoctorWriteSerializer(self.doctor, data={"name": "Dr. Capri Jr."}, partial=True)
        self.assertTrue(serializer.is_valid(), serializer.errors)
        return serializer

    def test_update_of_existing_row(self):
        save_existing(self._serializer())

        self.doctor.refresh_from_db()
        self.assertEqual(self.doctor.name, "Dr. Capri Jr.")

    def test_row_deleted_between_load_and_save_is_not_found(self):
        serializer = self._serializer()
        Doctor.objects.filter(pk=self.doctor.pk).delete()

        with self.assertRaises(NotFound):
            save_existing(serializer)

        self.assertFalse(Doctor.objects.filter(pk=self.doctor.pk).exists())

    def test_other_database_errors_propagate(self):
        serializer = self._serializer()

        with patch.object(DoctorWriteSerializer, "save", side_effect=DatabaseError("disk full")):
            with self.assertRaises(DatabaseError):
                save_existing(serializer)
