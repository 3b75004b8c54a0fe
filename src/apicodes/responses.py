from __future__ import annotations

import json
import logging
from http import HTTPStatus
from typing import Any, Optional

import httpx

from .codes import code_for_status
from .exceptions import Err, ErrorResponse
from .structures import Response, new_response
from .utils import originating_request, sanitize_url

logger = logging.getLogger(__name__)


def _body_err(response: Any) -> Optional[Err]:
    try:
        text = getattr(response, "text", "") or ""
    except httpx.ResponseNotRead:
        return None
    if not text.strip():
        return None
    try:
        payload = json.loads(text)
    except ValueError:
        return None
    if not isinstance(payload, dict) or "error" not in payload:
        return None
    try:
        return Err.from_dict(payload["error"])
    except ValueError:
        logger.debug("Ignoring malformed error payload: %r", payload["error"])
        return None


def error_from_response(response: Any) -> ErrorResponse:
    """Build an ErrorResponse from a failed transport response.

    A JSON body of the form ``{"error": {"message": ..., "code": ...}}`` wins;
    otherwise the code is derived from the HTTP status.
    """

    if isinstance(response, Response):
        response = response.raw
    status_code = int(response.status_code)
    err = _body_err(response) or Err(code_for_status(status_code))
    error = ErrorResponse(response, err)
    request = originating_request(response)
    logger.debug(
        "%s %s failed with HTTP %d, classified as %s",
        getattr(request, "method", "?"),
        sanitize_url(getattr(request, "url", None)),
        status_code,
        err,
    )
    return error


def check_response(response: Any) -> Response:
    """Return the wrapped response, or raise ErrorResponse for HTTP 4xx/5xx."""

    if isinstance(response, Response):
        response = response.raw
    if int(response.status_code) >= HTTPStatus.BAD_REQUEST:
        raise error_from_response(response)
    return new_response(response)


__all__ = ["error_from_response", "check_response"]
