"""
DRF exception handler producing the response envelope.

Configured through ``REST_FRAMEWORK['EXCEPTION_HANDLER']``. Every error
raised inside an API view ends up here, so clients always get a JSON body
of the form ``{success: false, message, statusCode}``.
"""

import logging

from rest_framework.views import exception_handler

from .exceptions import ServiceError
from .responses import envelope

logger = logging.getLogger(__name__)

PASSTHROUGH_HEADERS = ('WWW-Authenticate', 'Retry-After', 'Allow')


def envelope_exception_handler(exc, context):
    if isinstance(exc, ServiceError):
        if exc.status_code >= 500:
            logger.error("Service error in %s: %s", _view_name(context), exc.message)
        return envelope(exc.message, status_code=exc.status_code, success=False)

    response = exception_handler(exc, context)
    if response is not None:
        wrapped = envelope(
            extract_message(response.data),
            status_code=response.status_code,
            success=False,
        )
        for header in PASSTHROUGH_HEADERS:
            if response.has_header(header):
                wrapped[header] = response[header]
        return wrapped

    logger.exception("Unhandled error in %s", _view_name(context))
    return envelope('Internal server error', status_code=500, success=False)


def extract_message(data):
    """Flatten DRF error data into a single human readable message."""
    if isinstance(data, dict):
        if 'detail' in data:
            return str(data['detail'])
        for field, errors in data.items():
            message = extract_message(errors)
            if field == 'non_field_errors':
                return message
            return f"{field}: {message}"
    if isinstance(data, (list, tuple)):
        if data:
            return extract_message(data[0])
        return 'Invalid input'
    return str(data)


def _view_name(context):
    view = context.get('view') if context else None
    return view.__class__.__name__ if view is not None else 'unknown view'
