"""
Doctors App Configuration
"""

from django.apps import AppConfig


class DoctorsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'clinic_backend.doctors'
    verbose_name = 'Doctors'
