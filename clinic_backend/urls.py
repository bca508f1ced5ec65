"""Clinic backend URL configuration.

API routes:
    /api/auth/            - Register, login, refresh, me (core)
    /api/health/          - Health check (core)
    /api/users/           - User administration, Admin only (core)
    /api/doctors/         - Doctors (doctors)
    /api/patients/        - Patients (patients)
    /api/appointments/    - Appointments (appointments)
    /api/medicalrecords/  - Medical records (medical)
"""

from django.contrib import admin
from django.http import HttpResponse
from django.urls import include, path


def root(request):
    """Plain-text liveness answer for non-API clients."""
    return HttpResponse("Clinic backend is running.")


urlpatterns = [
    path("", root, name="root"),
    path("admin/", admin.site.urls),

    path("api/", include("clinic_backend.core.urls")),
    path("api/", include("clinic_backend.doctors.urls")),
    path("api/", include("clinic_backend.patients.urls")),
    path("api/", include("clinic_backend.appointments.urls")),
    path("api/", include("clinic_backend.medical.urls")),
]
