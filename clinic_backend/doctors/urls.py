"""Doctor URLs.

Prefix: /api/
Routes (trailing slash optional):
    GET/POST             /api/doctors
    GET/PUT/PATCH/DELETE /api/doctors/<pk>
    GET                  /api/doctors/<pk>/appointments
    GET                  /api/doctors/specialty/<specialty>
    GET                  /api/doctors/user/<user_id>
"""

from django.urls import re_path

from .views import (
    DoctorAppointmentsView,
    DoctorBySpecialtyView,
    DoctorByUserView,
    DoctorDetailView,
    DoctorListCreateView,
)

app_name = 'doctors'

urlpatterns = [
    re_path(r'^doctors/?$', DoctorListCreateView.as_view(), name='doctor_list'),
    re_path(r'^doctors/specialty/(?P<specialty>[^/]+)/?$', DoctorBySpecialtyView.as_view(), name='doctor_by_specialty'),
    re_path(r'^doctors/user/(?P<user_id>\d+)/?$', DoctorByUserView.as_view(), name='doctor_by_user'),
    re_path(r'^doctors/(?P<pk>\d+)/appointments/?$', DoctorAppointmentsView.as_view(), name='doctor_appointments'),
    re_path(r'^doctors/(?P<pk>\d+)/?$', DoctorDetailView.as_view(), name='doctor_detail'),
]
