import logging

from django.db import DatabaseError, transaction
from rest_framework.exceptions import NotFound

from .models import AuditLog

logger = logging.getLogger(__name__)


def log_action(user, action, object_type='', object_id=None, meta=None):
    """Write one audit row for a data-changing API action.

    A failing audit write is logged and swallowed so it never breaks the
    request that triggered it.
    """

    role_name = getattr(user, 'role', '') or ''

    try:
        AuditLog.objects.create(
            user=user if getattr(user, 'is_authenticated', False) else None,
            role_name=role_name,
            action=action,
            object_type=object_type,
            object_id=object_id,
            meta=meta,
        )
    except Exception:
        logger.exception('AuditLog write failed (action=%s, %s=%s)', action, object_type, object_id)


def save_existing(serializer):
    """Save an update serializer, reporting a vanished row as 404.

    Update serializers save with ``force_update=True`` so a row deleted
    between load and save raises instead of being re-inserted. When that
    happens and the row is really gone the caller gets ``NotFound``; any
    other database error propagates.
    """
    instance = serializer.instance
    model = type(instance)
    try:
        with transaction.atomic():
            return serializer.save()
    except DatabaseError:
        if not model.objects.filter(pk=instance.pk).exists():
            logger.info('%s #%s vanished during update', model.__name__, instance.pk)
            raise NotFound()
        raise
