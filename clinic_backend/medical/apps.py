from django.apps import AppConfig


class MedicalConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'clinic_backend.medical'
    verbose_name = 'Medical records'
