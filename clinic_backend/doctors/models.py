from django.conf import settings
from django.db import models


class Doctor(models.Model):
    """A practising doctor.

    A doctor profile can be linked to at most one login account (``user``).
    Profiles created by an admin start without an account; profiles created
    through self-registration are linked immediately.
    """

    name = models.CharField(max_length=100)
    pwz_number = models.CharField(max_length=100, default='TBD')  # medical licence number
    specialty = models.CharField(max_length=100, db_index=True)
    work_hours = models.CharField(max_length=100, default='9:00-17:00')
    phone_number = models.CharField(max_length=50, null=True, blank=True)
    email = models.EmailField(max_length=255, null=True, blank=True)
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name='doctor_profile',
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['name', 'id']
        verbose_name = 'Doctor'
        verbose_name_plural = 'Doctors'

    def __str__(self) -> str:
        return f"{self.name} ({self.specialty})"
