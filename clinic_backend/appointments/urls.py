"""Appointment URLs.

Prefix: /api/
Routes (trailing slash optional):
    GET/POST             /api/appointments
    GET/PUT/PATCH/DELETE /api/appointments/<pk>
    GET                  /api/appointments/doctor/<doctor_id>
    GET                  /api/appointments/patient/<patient_id>
"""

from django.urls import re_path

from .views import (
	AppointmentDetailView,
	AppointmentListCreateView,
	DoctorScheduleView,
	PatientAppointmentsView,
)

app_name = 'appointments'

urlpatterns = [
	re_path(r'^appointments/?$', AppointmentListCreateView.as_view(), name='appointment_list'),
	re_path(r'^appointments/doctor/(?P<doctor_id>\d+)/?$', DoctorScheduleView.as_view(), name='appointments_by_doctor'),
	re_path(r'^appointments/patient/(?P<patient_id>\d+)/?$', PatientAppointmentsView.as_view(), name='appointments_by_patient'),
	re_path(r'^appointments/(?P<pk>\d+)/?$', AppointmentDetailView.as_view(), name='appointment_detail'),
]
