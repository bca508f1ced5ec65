"""Medical record URLs.

Prefix: /api/
Routes (trailing slash optional):
    GET/POST             /api/medicalrecords
    GET/PUT/PATCH/DELETE /api/medicalrecords/<pk>
    GET                  /api/medicalrecords/patient/<patient_id>
"""

from django.urls import re_path

from .views import (
    MedicalRecordDetailView,
    MedicalRecordListCreateView,
    PatientMedicalRecordsView,
)

app_name = 'medical'

urlpatterns = [
    re_path(r'^medicalrecords/?$', MedicalRecordListCreateView.as_view(), name='medical_record_list'),
    re_path(r'^medicalrecords/patient/(?P<patient_id>\d+)/?$', PatientMedicalRecordsView.as_view(), name='medical_records_by_patient'),
    re_path(r'^medicalrecords/(?P<pk>\d+)/?$', MedicalRecordDetailView.as_view(), name='medical_record_detail'),
]
