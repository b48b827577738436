"""
Project-wide DRF exception handler.

Shapes every error response into the contract the mobile client expects:

    {"error": "..."}      - validation, auth and not-found errors
    {"message": "..."}    - unexpected server errors (500)

Serializer field errors are kept under ``details`` alongside the summary.
"""

import logging

from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def _first_message(detail):
    """Return the first human-readable message from a DRF error detail."""
    if isinstance(detail, dict):
        for field, value in detail.items():
            message = _first_message(value)
            if field == 'non_field_errors':
                return message
            return f"{field}: {message}"
        return 'Invalid input.'
    if isinstance(detail, list):
        return _first_message(detail[0]) if detail else 'Invalid input.'
    return str(detail)


def api_exception_handler(exc, context):
    response = exception_handler(exc, context)

    if response is None:
        view = context.get('view')
        logger.exception(
            "Unhandled error in %s", view.__class__.__name__ if view else 'unknown view'
        )
        return Response(
            {'message': 'Internal server error'},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    if isinstance(exc, exceptions.ValidationError):
        response.data = {
            'error': _first_message(exc.detail),
            'details': response.data,
        }
    elif isinstance(response.data, dict) and 'detail' in response.data:
        response.data = {'error': str(response.data['detail'])}

    return response
