from __future__ import annotations

from .codes import UNDEFINED_DESCRIPTION, Code, code_for_status, describe
from .exceptions import Err, ErrorResponse, new_err, new_error_response
from .responses import check_response, error_from_response
from .structures import Response, new_response
from .utils import REDACTED, SENSITIVE_PARAM, originating_request, sanitize_url

__all__ = [
    "Code",
    "UNDEFINED_DESCRIPTION",
    "describe",
    "code_for_status",
    "Err",
    "ErrorResponse",
    "new_err",
    "new_error_response",
    "Response",
    "new_response",
    "check_response",
    "error_from_response",
    "sanitize_url",
    "originating_request",
    "SENSITIVE_PARAM",
    "REDACTED",
]
