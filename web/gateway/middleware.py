"""Middleware for request correlation and API payload limits.

``RequestIdMiddleware`` makes sure every request carries an identifier. It is
read from the incoming ``X-Request-ID`` header when the client sends one, or
generated server-side otherwise. The id is stored on the request and in the
``REQUEST_ID_CTX`` context variable, so log records emitted anywhere during
the request can be correlated (see ``gateway.logging_filters``), and it is
echoed back in the ``X-Request-ID`` response header.

``ApiSizeLimitMiddleware`` rejects API requests whose declared body size
exceeds ``API_MAX_BYTES`` with a 413.
"""

import contextvars
import logging
import os
import uuid

from django.http import JsonResponse
from django.utils.deprecation import MiddlewareMixin

REQUEST_ID_CTX = contextvars.ContextVar("request_id", default="-")
MAX_API_BYTES = int(os.getenv("API_MAX_BYTES", str(1 * 1024 * 1024)))
API_PREFIX = "/v1/"

logger = logging.getLogger("gateway")


class RequestIdMiddleware(MiddlewareMixin):
    """Sets a per-request identifier and logs each handled request.

    Attributes:
        HEADER (str): Incoming header as found in ``request.META``.
        RESPONSE_HEADER (str): Header added to every response.
    """

    HEADER = "HTTP_X_REQUEST_ID"
    RESPONSE_HEADER = "X-Request-ID"

    def process_request(self, request):
        rid = request.META.get(self.HEADER) or str(uuid.uuid4())
        request.request_id = rid
        REQUEST_ID_CTX.set(rid)

    def process_response(self, request, response):
        """Add the id header and emit one structured access log line."""
        rid = getattr(request, "request_id", REQUEST_ID_CTX.get())
        response[self.RESPONSE_HEADER] = rid
        logger.info(
            "request handled",
            extra={"path": request.path, "method": request.method, "status": response.status_code},
        )
        return response


class ApiSizeLimitMiddleware(MiddlewareMixin):
    def process_request(self, request):
        if request.path.startswith(API_PREFIX):
            clen = request.META.get("CONTENT_LENGTH")
            if clen and clen.isdigit() and int(clen) > MAX_API_BYTES:
                return JsonResponse({"detail": "PAYLOAD_TOO_LARGE"}, status=413)
