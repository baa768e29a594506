"""Views for the localization strings project."""

import logging

from django.db import DatabaseError, connection
from django.http import HttpResponse
from django.views import View

logger = logging.getLogger(__name__)


class HealthcheckView(View):
    """Handle health check requests."""

    def get(self, request):
        """
        Return health check status.

        Unauthenticated; answers 'ok' when the database holding the translations
        responds and 'nok' with status 503 otherwise.
        """
        try:
            with connection.cursor() as cursor:
                cursor.execute("SELECT 1;")
                if cursor.fetchone()[0] == 1:
                    return HttpResponse("ok")
        except DatabaseError as e:
            logger.error(f"Healthcheck database query failed: {e}")
        return HttpResponse("nok", status=503)
