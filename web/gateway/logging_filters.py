"""Logging filter that stamps records with the current request id.

Configured on the console handler in ``storefront.settings.LOGGING`` so the
JSON formatter can always reference ``%(request_id)s``.
"""

from logging import Filter, LogRecord

from .middleware import REQUEST_ID_CTX


class RequestIdFilter(Filter):
    """Attach ``request_id`` from ``REQUEST_ID_CTX`` to every record.

    Outside of a request the context variable holds its default, a hyphen.
    """

    def filter(self, record: LogRecord) -> bool:
        record.request_id = REQUEST_ID_CTX.get()
        return True
