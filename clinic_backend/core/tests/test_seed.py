from __future__ import annotations

from io import StringIO

from django.core.management import call_command
from django.test import TestCase

from clinic_backend.appointments.models import Appointment
from clinic_backend.core.models import Role, User
from clinic_backend.doctors.models import Doctor
from clinic_backend.medical.models import MedicalRecord
from clinic_backend.patients.models import Patient


class SeedCommandTest(TestCase):
    databases = {"default"}

    def _seed(self, *args):
        call_command("seed", *args, stdout=StringIO())

    def test_seed_creates_demo_data(self):
        self._seed()

        admin = User.objects.get(username="admin")
        self.assertEqual(admin.role, Role.ADMIN)
        self.assertTrue(admin.check_password("Admin123!"))

        capri = Doctor.objects.get(user__username="doctorcapri")
        self.assertEqual(capri.pwz_number, "12345")
        self.assertEqual(capri.specialty, "Cardiology")
        self.assertTrue(capri.user.check_password("Doctor123!"))

        self.assertEqual(Patient.objects.count(), 2)
        self.assertEqual(Appointment.objects.filter(doctor=capri).count(), 2)
        self.assertEqual(MedicalRecord.objects.count(), 2)

    def test_seed_is_idempotent(self):
        self._seed()
        self._seed()

        self.assertEqual(User.objects.count(), 2)
        self.assertEqual(Doctor.objects.count(), 1)
        self.assertEqual(Patient.objects.count(), 2)
        self.assertEqual(Appointment.objects.count(), 2)
        self.assertEqual(MedicalRecord.objects.count(), 2)

    def test_flush_rebuilds(self):
        self._seed()
        self._seed("--flush")

        self.assertEqual(User.objects.count(), 2)
        self.assertEqual(Doctor.objects.count(), 1)
        self.assertEqual(Patient.objects.count(), 2)
        self.assertEqual(Appointment.objects.count(), 2)
        self.assertEqual(MedicalRecord.objects.count(), 2)
