"""
Core App Configuration
"""

from django.apps import AppConfig


class CoreConfig(AppConfig):
    """Users, roles, authentication and the audit trail."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'clinic_backend.core'
    verbose_name = 'Core (Users & Roles)'
