from django.contrib import admin

from .models import Doctor


@admin.register(Doctor)
class DoctorAdmin(admin.ModelAdmin):
    list_display = ("name", "specialty", "pwz_number", "work_hours", "phone_number", "email", "user")
    list_filter = ("specialty",)
    search_fields = ("name", "specialty", "pwz_number", "email")
    raw_id_fields = ("user",)
    ordering = ("name",)
