"""Error translation shared by the HTTP and Lambda transports.

Domain exceptions expose ``status_code`` and ``message``; anything that
has both is answered with that status and ``{"error": message}``.  Any
other exception is logged and answered with a 500 whose message is
prefixed with the operation that failed.
"""

from __future__ import annotations

from typing import Any, Dict, Tuple

import structlog
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = structlog.get_logger(__name__)


def is_custom_error(exc: BaseException) -> bool:
    """``True`` when ``exc`` carries an int ``status_code`` and a str ``message``."""
    return isinstance(getattr(exc, "status_code", None), int) and isinstance(
        getattr(exc, "message", None), str
    )


def error_payload(exc: Exception, context: str) -> Tuple[int, Dict[str, Any]]:
    """Map an exception to ``(status_code, body)``.

    ``context`` is the prefix used for unexpected errors, e.g.
    ``"An error occurred when creating customer:"``.
    """
    if is_custom_error(exc):
        return exc.status_code, {"error": exc.message}
    logger.exception("request.unexpected_error", context=context)
    return status.HTTP_500_INTERNAL_SERVER_ERROR, {"error": f"{context} {exc}"}


def error_response(exc: Exception, context: str) -> Response:
    status_code, body = error_payload(exc, context)
    return Response(body, status=status_code)


def api_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response | None:
    """DRF ``EXCEPTION_HANDLER``: keep DRF's status, reshape the body.

    Parse errors, unsupported methods and the like come out as
    ``{"error": "<detail>"}`` like every other error of this API.
    """
    response = exception_handler(exc, context)
    if response is None:
        return None

    detail = response.data.get("detail") if isinstance(response.data, dict) else None
    response.data = {"error": str(detail) if detail is not None else str(response.data)}
    return response
