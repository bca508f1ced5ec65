from django.conf import settings
from django.contrib.auth.models import AbstractUser
from django.db import models


class Role(models.TextChoices):
    """Roles carried as a claim in every issued token.

    - Admin: full access, user administration
    - Doctor: clinical write access (patients, appointments, records)
    - User: patient-facing account, read-only access
    """

    ADMIN = 'Admin', 'Admin'
    DOCTOR = 'Doctor', 'Doctor'
    USER = 'User', 'User'


class User(AbstractUser):
    """Custom User model with role-based access control.

    Extends Django's AbstractUser with a single ``role`` field. A user may
    own at most one ``doctors.Doctor`` profile (reverse accessor
    ``doctor_profile``).
    """

    role = models.CharField(
        max_length=20,
        choices=Role.choices,
        default=Role.USER,
        db_index=True,
    )

    class Meta:
        db_table = 'core_user'
        ordering = ['username']
        verbose_name = 'User'
        verbose_name_plural = 'Users'


class AuditLog(models.Model):
    """Audit log for data-changing API actions.

    Tracks who changed which clinical object and when. ``object_id`` is a
    plain integer so log rows survive deletion of the object they describe.
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='audit_logs',
    )
    role_name = models.CharField(max_length=20, blank=True, db_index=True)
    action = models.CharField(max_length=50, db_index=True)
    object_type = models.CharField(max_length=50, blank=True, db_index=True)
    object_id = models.IntegerField(null=True, blank=True)
    timestamp = models.DateTimeField(auto_now_add=True, db_index=True)
    meta = models.JSONField(null=True, blank=True)

    class Meta:
        db_table = 'core_auditlog'
        ordering = ['-timestamp', '-id']
        verbose_name = 'Audit Log'
        verbose_name_plural = 'Audit Logs'
        indexes = [
            models.Index(fields=['object_type', 'object_id'], name='core_auditlog_object_idx'),
        ]

    def __str__(self) -> str:
        return f"{self.timestamp} {self.action} ({self.object_type}={self.object_id})"
