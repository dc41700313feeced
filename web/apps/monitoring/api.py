"""Health endpoint reporting database reachability."""

import logging

from django.db import DatabaseError, connection
from django.http import JsonResponse

logger = logging.getLogger("gateway")


def health_view(_request):
    """Return 200 when the database answers ``SELECT 1``, 503 otherwise."""
    db_ok = False
    try:
        with connection.cursor() as cur:
            cur.execute("SELECT 1;")
        db_ok = True
    except DatabaseError:
        logger.exception("health check: database unreachable")

    return JsonResponse(
        {"ok": db_ok, "components": {"db": {"ok": db_ok}}},
        status=200 if db_ok else 503,
    )
