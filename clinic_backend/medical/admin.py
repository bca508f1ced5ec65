from django.contrib import admin

from .models import MedicalRecord


@admin.register(MedicalRecord)
class MedicalRecordAdmin(admin.ModelAdmin):
    list_display = ("record_date", "patient", "diagnosis", "treatment")
    search_fields = ("patient__name", "diagnosis", "treatment", "notes")
    date_hierarchy = "record_date"
    raw_id_fields = ("patient",)
    ordering = ("-record_date",)
