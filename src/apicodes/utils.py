from __future__ import annotations

from typing import Any, List, Tuple
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import httpx

SENSITIVE_PARAM = "token"
REDACTED = "REDACTED"


def _redact_params(params: List[Tuple[str, str]]) -> List[Tuple[str, str]]:
    result: List[Tuple[str, str]] = []
    replaced = False
    for key, value in params:
        if key != SENSITIVE_PARAM:
            result.append((key, value))
        elif not replaced:
            result.append((key, REDACTED))
            replaced = True
    return result


def sanitize_url(url: Any) -> Any:
    """Redact the token query parameter from a URL shown to the user.

    Returns ``None`` for ``None`` and the URL itself when it carries no
    non-empty token. ``httpx.URL`` input gives ``httpx.URL`` output.
    """

    if url is None:
        return None
    parts = urlsplit(str(url))
    params = parse_qsl(parts.query, keep_blank_values=True)
    if not any(key == SENSITIVE_PARAM and value for key, value in params):
        return url

    sanitized = urlunsplit(parts._replace(query=urlencode(_redact_params(params))))
    if isinstance(url, httpx.URL):
        return httpx.URL(sanitized)
    return sanitized


def originating_request(response: Any) -> Any:
    """Return the request that produced ``response``, or None when it is unknown."""

    if response is None:
        return None
    try:
        return getattr(response, "request", None)
    except RuntimeError:
        # httpx raises when the response was built without a request
        return None


__all__ = ["SENSITIVE_PARAM", "REDACTED", "sanitize_url", "originating_request"]
