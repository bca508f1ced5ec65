from django.contrib import admin

from .models import Appointment


@admin.register(Appointment)
class AppointmentAdmin(admin.ModelAdmin):
	list_display = ("appointment_date", "doctor", "patient", "status")
	list_filter = ("status", "doctor")
	search_fields = ("doctor__name", "patient__name", "notes")
	date_hierarchy = "appointment_date"
	raw_id_fields = ("doctor", "patient")
	ordering = ("-appointment_date",)
