from django.apps import AppConfig


class AppointmentsConfig(AppConfig):
	default_auto_field = 'django.db.models.BigAutoField'
	name = 'clinic_backend.appointments'
	verbose_name = 'Appointments'
