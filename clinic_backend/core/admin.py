"""
Admin registrations for users and the audit log.
"""

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as DjangoUserAdmin

from .models import AuditLog, User

admin.site.site_header = "Clinic Administration"
admin.site.site_title = "Clinic Admin"
admin.site.index_title = "System overview"


@admin.register(User)
class UserAdmin(DjangoUserAdmin):
    """User admin with the clinic role exposed."""

    list_display = ("username", "role", "email", "is_active", "is_staff", "last_login")
    list_filter = ("role", "is_active", "is_staff")
    search_fields = ("username", "email", "first_name", "last_name")
    ordering = ("username",)

    fieldsets = DjangoUserAdmin.fieldsets + (
        ("Clinic", {"fields": ("role",)}),
    )
    add_fieldsets = DjangoUserAdmin.add_fieldsets + (
        ("Clinic", {"fields": ("role",)}),
    )


@admin.register(AuditLog)
class AuditLogAdmin(admin.ModelAdmin):
    """Read-only audit trail."""

    list_display = ("timestamp", "action", "object_type", "object_id", "user", "role_name")
    list_filter = ("action", "object_type", "role_name")
    search_fields = ("action", "object_type", "user__username")
    date_hierarchy = "timestamp"
    list_per_page = 50
    readonly_fields = ("timestamp", "user", "role_name", "action", "object_type", "object_id", "meta")

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
