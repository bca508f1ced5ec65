"""
API-level exceptions and the project-wide DRF exception handler.

Service functions raise ``ClinicError`` subclasses; views translate them
into HTTP responses with ``to_dict()``.
"""

from __future__ import annotations

import logging
from typing import Any

from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)


class ClinicError(Exception):
    """Base exception for domain errors raised by service functions."""
    pass


class InvalidReference(ClinicError):
    """
    Raised when a write references a doctor/patient that does not exist.

    Attributes:
        field: name of the offending request field (camelCase, as sent)
        value: the id that could not be resolved
    """
    def __init__(self, message: str, *, field: str | None = None, value: Any = None):
        self.field = field
        self.value = value
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {'detail': str(self)}
        if self.field:
            result['field'] = self.field
        return result


def api_exception_handler(exc, context):
    """Wrap DRF's handler so bare string/list payloads become ``{"detail": ...}``.

    Field-level validation errors (dicts) are passed through untouched.
    Unhandled exceptions return ``None`` and surface as 500s.
    """
    response = drf_exception_handler(exc, context)
    if response is None:
        return None

    data = response.data
    if isinstance(data, list):
        if len(data) == 1:
            response.data = {'detail': data[0]}
        else:
            response.data = {'detail': data}
    elif isinstance(data, str):
        response.data = {'detail': data}

    if response.status_code >= 500:
        logger.error('API error %s: %s', response.status_code, response.data)
    return response
