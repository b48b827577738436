"""
Static API key authentication.

Every request under /api must carry the shared secret configured as
``settings.API_KEY`` in the ``X-API-Key`` header. When no key is configured
the API is left open (a warning is logged once). A missing header is only
tolerated while ``DEBUG`` is on.
"""

import logging
import secrets

from django.conf import settings
from django.contrib.auth.models import AnonymousUser
from rest_framework.authentication import BaseAuthentication
from rest_framework.exceptions import AuthenticationFailed

logger = logging.getLogger(__name__)

API_KEY_HEADER = 'X-API-Key'


class APIKeyAuthentication(BaseAuthentication):
    """
    Authenticate requests by comparing X-API-Key against the server secret.

    Successful authentication yields ``(AnonymousUser(), key)``; there are no
    user accounts in this system, only the shared key.
    """

    _warned_unprotected = False

    def authenticate(self, request):
        expected = getattr(settings, 'API_KEY', '')
        if not expected:
            if not APIKeyAuthentication._warned_unprotected:
                logger.warning("API_KEY is not set. API is unprotected!")
                APIKeyAuthentication._warned_unprotected = True
            return None

        provided = request.headers.get(API_KEY_HEADER)

        if not provided:
            if settings.DEBUG:
                return None
            raise AuthenticationFailed('API key required')

        if not secrets.compare_digest(provided.encode(), expected.encode()):
            raise AuthenticationFailed('Invalid API key')

        return (AnonymousUser(), provided)

    def authenticate_header(self, request):
        # Makes DRF answer 401 instead of 403
        return API_KEY_HEADER
