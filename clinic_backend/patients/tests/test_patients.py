from __future__ import annotations

from datetime import date, timedelta
from unittest.mock import patch

from django.test import TestCase
from django.utils import timezone

from rest_framework.test import APIClient

from clinic_backend.appointments.models import Appointment
from clinic_backend.core.models import AuditLog, Role, User
from clinic_backend.doctors.models import Doctor
from clinic_backend.medical.models import MedicalRecord
from clinic_backend.patients.models import Patient


class PatientAPITest(TestCase):
    """Tests for /api/patients endpoints.

    RBAC: admin = full access; doctor = read + create/update; user = read-only
    """

    databases = {"default"}

    def setUp(self):
        self.admin = User.objects.create_user(
            username="admin_patient_test",
            password="DummyPass123!",
            role=Role.ADMIN,
        )
        self.doctor = User.objects.create_user(
            username="doctor_patient_test",
            password="DummyPass123!",
            role=Role.DOCTOR,
        )
        self.plain = User.objects.create_user(
            username="user_patient_test",
            password="DummyPass123!",
            role=Role.USER,
        )

        self.alice = Patient.objects.create(
            name="Alice Brown",
            date_of_birth=date(1985, 5, 15),
            gender="Female",
            phone_number="123-456-7892",
            email="alice.brown@email.com",
        )
        self.bob = Patient.objects.create(
            name="Bob Wilson",
            date_of_birth=date(1990, 8, 20),
            gender="Male",
        )

    def _client_for(self, user: User) -> APIClient:
        client = APIClient()
        client.defaults["HTTP_HOST"] = "localhost"
        client.force_authenticate(user=user)
        return client

    def _payload(self, **overrides):
        data = {
            "name": "Carol White",
            "dateOfBirth": "1975-01-31",
            "gender": "Female",
            "phoneNumber": "555-1234",
            "email": "carol@example.com",
        }
        data.update(overrides)
        return data

    # ========== LIST / RETRIEVE ==========

    def test_list_unauthenticated_is_401(self):
        response = APIClient().get("/api/patients")
        self.assertEqual(response.status_code, 401)

    def test_list_as_user_returns_patients(self):
        response = self._client_for(self.plain).get("/api/patients")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(len(response.data), 2)

    def test_retrieve_returns_camelcase_dto(self):
        response = self._client_for(self.doctor).get(f"/api/patients/{self.alice.id}")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.data,
            {
                "id": self.alice.id,
                "name": "Alice Brown",
                "dateOfBirth": "1985-05-15",
                "gender": "Female",
                "phoneNumber": "123-456-7892",
                "email": "alice.brown@email.com",
            },
        )

    def test_list_query_filters(self):
        client = self._client_for(self.plain)

        response = client.get("/api/patients", {"search": "ali"})
        self.assertEqual([p["id"] for p in response.data], [self.alice.id])

        response = client.get("/api/patients", {"gender": "male"})
        self.assertEqual([p["id"] for p in response.data], [self.bob.id])

    def test_by_gender_is_case_insensitive_equality(self):
        response = self._client_for(self.plain).get("/api/patients/gender/FEMALE")

        self.assertEqual(response.status_code, 200)
        # "Male" is a substring of "Female" but must not match an exact lookup
        self.assertEqual([p["id"] for p in response.data], [self.alice.id])

    def test_search_by_name_substring(self):
        response = self._client_for(self.plain).get("/api/patients/search/wil")

        self.assertEqual(response.status_code, 200)
        self.assertEqual([p["id"] for p in response.data], [self.bob.id])

    def test_search_without_match_is_empty(self):
        response = self._client_for(self.plain).get("/api/patients/search/zzz")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data, [])

    # ========== CREATE ==========

    def test_create_as_doctor(self):
        response = self._client_for(self.doctor).post("/api/patients", self._payload(), format="json")

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.data["name"], "Carol White")
        self.assertEqual(response.data["dateOfBirth"], "1975-01-31")
        self.assertTrue(Patient.objects.filter(id=response.data["id"]).exists())

    def test_create_accepts_datetime_date_of_birth(self):
        response = self._client_for(self.admin).post(
            "/api/patients",
            self._payload(dateOfBirth="1975-01-31T00:00:00"),
            format="json",
        )

        self.assertEqual(response.status_code, 201)
        patient = Patient.objects.get(id=response.data["id"])
        self.assertEqual(patient.date_of_birth, date(1975, 1, 31))

    def test_create_as_user_forbidden(self):
        response = self._client_for(self.plain).post("/api/patients", self._payload(), format="json")
        self.assertEqual(response.status_code, 403)

    def test_create_invalid_payload_is_400(self):
        response = self._client_for(self.admin).post(
            "/api/patients",
            self._payload(name="", dateOfBirth="not-a-date"),
            format="json",
        )

        self.assertEqual(response.status_code, 400)
        self.assertIn("name", response.data)
        self.assertIn("dateOfBirth", response.data)

    # ========== UPDATE / DELETE ==========

    def test_update_as_doctor_returns_204(self):
        response = self._client_for(self.doctor).put(
            f"/api/patients/{self.bob.id}",
            self._payload(name="Robert Wilson", dateOfBirth="1990-08-20", gender="Male"),
            format="json",
        )

        self.assertEqual(response.status_code, 204)
        self.bob.refresh_from_db()
        self.assertEqual(self.bob.name, "Robert Wilson")
        self.assertEqual(self.bob.email, "carol@example.com")

    def test_update_missing_is_404(self):
        response = self._client_for(self.admin).put("/api/patients/99999", self._payload(), format="json")
        self.assertEqual(response.status_code, 404)

    def test_delete_as_doctor_forbidden(self):
        response = self._client_for(self.doctor).delete(f"/api/patients/{self.bob.id}")
        self.assertEqual(response.status_code, 403)
        self.assertTrue(Patient.objects.filter(id=self.bob.id).exists())

    def test_delete_as_admin_returns_204(self):
        response = self._client_for(self.admin).delete(f"/api/patients/{self.bob.id}")
        self.assertEqual(response.status_code, 204)
        self.assertFalse(Patient.objects.filter(id=self.bob.id).exists())

    def test_delete_removes_appointments_and_medical_records(self):
        doctor = Doctor.objects.create(name="Dr. Capri", specialty="Cardiology")
        appt = Appointment.objects.create(
            doctor=doctor,
            patient=self.bob,
            appointment_date=timezone.now() + timedelta(days=14),
        )
        record = MedicalRecord.objects.create(
            patient=self.bob,
            record_date=timezone.now() - timedelta(days=15),
            diagnosis="Common cold",
            treatment="Rest and fluids",
        )

        response = self._client_for(self.admin).delete(f"/api/patients/{self.bob.id}")

        self.assertEqual(response.status_code, 204)
        self.assertFalse(Appointment.objects.filter(id=appt.id).exists())
        self.assertFalse(MedicalRecord.objects.filter(id=record.id).exists())
        self.assertTrue(Doctor.objects.filter(id=doctor.id).exists())

    # ========== AUDIT ==========

    def test_create_succeeds_when_audit_write_fails(self):
        with patch.object(AuditLog.objects, "create", side_effect=RuntimeError("audit store down")):
            with self.assertLogs("clinic_backend.core.utils", level="ERROR"):
                response = self._client_for(self.admin).post("/api/patients", self._payload(), format="json")

        self.assertEqual(response.status_code, 201)
        self.assertTrue(Patient.objects.filter(id=response.data["id"]).exists())
        self.assertEqual(AuditLog.objects.count(), 0)
