"""Patient URLs.

Prefix: /api/
Routes (trailing slash optional):
    GET/POST             /api/patients
    GET/PUT/PATCH/DELETE /api/patients/<pk>
    GET                  /api/patients/gender/<gender>
    GET                  /api/patients/search/<name>
"""

from django.urls import re_path

from .views import (
    PatientByGenderView,
    PatientDetailView,
    PatientListCreateView,
    PatientSearchView,
)

app_name = 'patients'

urlpatterns = [
    re_path(r'^patients/?$', PatientListCreateView.as_view(), name='patient_list'),
    re_path(r'^patients/gender/(?P<gender>[^/]+)/?$', PatientByGenderView.as_view(), name='patient_by_gender'),
    re_path(r'^patients/search/(?P<name>[^/]+)/?$', PatientSearchView.as_view(), name='patient_search'),
    re_path(r'^patients/(?P<pk>\d+)/?$', PatientDetailView.as_view(), name='patient_detail'),
]
