"""Helpers that turn validation failures into field-level error bodies.

Every 400 produced by the API has the same shape: a list of
``{"field": ..., "message": ...}`` pairs. Pydantic errors raised by the
request DTOs are converted by ``field_errors`` inside the views. DRF errors
raised while reading the body (malformed JSON, or a 415 for a non-JSON
content type) are converted by ``api_exception_handler``, which is
registered as the DRF ``EXCEPTION_HANDLER``; they keep their status code.
"""

from pydantic import ValidationError
from rest_framework.exceptions import ParseError, UnsupportedMediaType
from rest_framework.views import exception_handler


def _field_name(loc: tuple) -> str:
    """Render a pydantic error location as a dotted field path."""
    if not loc:
        return "body"
    return ".".join(str(part) for part in loc)


def field_errors(exc: ValidationError) -> list[dict]:
    """Convert a pydantic ``ValidationError`` into ``[{field, message}]``.

    Args:
        exc: The error raised by ``model_validate``.

    Returns:
        list[dict]: One entry per failed constraint, in pydantic's order.
    """
    return [
        {"field": _field_name(err.get("loc", ())), "message": err.get("msg", "Invalid value")}
        for err in exc.errors()
    ]


def field_error(field: str, message: str) -> list[dict]:
    """Single-entry error body for failures detected outside pydantic."""
    return [{"field": field, "message": message}]


def api_exception_handler(exc, context):
    """DRF exception handler that reshapes body errors into field errors."""
    response = exception_handler(exc, context)
    if response is not None and isinstance(exc, (ParseError, UnsupportedMediaType)):
        response.data = field_error("body", str(exc.detail))
    return response
