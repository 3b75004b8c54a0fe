from __future__ import annotations

from typing import Any, Dict, Union

from .codes import Code, describe
from .structures import Response
from .utils import originating_request, sanitize_url

MAX_CODE = 2**32 - 1


def _as_code(code: int) -> Union[Code, int]:
    if isinstance(code, bool) or not isinstance(code, int):
        raise TypeError("code must be int")
    if not 0 <= code <= MAX_CODE:
        raise ValueError(f"code must be between 0 and {MAX_CODE}")
    try:
        return Code(code)
    except ValueError:
        return int(code)


class Err(Exception):
    """Error classification with a message.

    An empty message is replaced with the code's description. ``str()``
    renders the code and its description.
    """

    def __init__(self, code: int, message: str = "") -> None:
        self._code = _as_code(code)
        self._message = message or describe(self._code)
        super().__init__(self._code, self._message)

    @property
    def code(self) -> Union[Code, int]:
        return self._code

    @property
    def message(self) -> str:
        return self._message

    def __str__(self) -> str:
        return f"{int(self._code)}: {describe(self._code)}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={int(self._code)}, message={self._message!r})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (int(self._code), self._message) == (int(other._code), other._message)

    def __hash__(self) -> int:
        return hash((int(self._code), self._message))

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self._message, "code": int(self._code)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Err":
        if not isinstance(data, dict):
            raise ValueError("error payload must be an object")
        code = data.get("code")
        if isinstance(code, bool) or not isinstance(code, int):
            raise ValueError("error payload must carry an integer code")
        message = data.get("message") or ""
        if not isinstance(message, str):
            raise ValueError("error message must be a string")
        return cls(code, message)


class ErrorResponse(Err):
    """Error caused by an API request, bound to the response that reported it."""

    def __init__(self, response: Any, err: Err) -> None:
        if isinstance(response, Response):
            response = response.raw
        super().__init__(err.code, err.message)
        self._response = response
        self._err = err

    def __reduce__(self) -> Any:
        return (type(self), (self._response, self._err))

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._response is other._response and self._err == other._err  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((id(self._response), self._err))

    @property
    def response(self) -> Any:
        return self._response

    @property
    def err(self) -> Err:
        return self._err

    def _request(self) -> Any:
        if self._response is None:
            raise ValueError("error response has no transport response")
        request = originating_request(self._response)
        if request is None:
            raise ValueError("error response has no originating request")
        return request

    def __str__(self) -> str:
        request = self._request()
        return (
            f"{request.method} {sanitize_url(request.url)}: "
            f"{self._response.status_code} {self._err}"
        )

    def __repr__(self) -> str:
        return f"ErrorResponse(response={self._response!r}, err={self._err!r})"

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self._err.to_dict()}


def new_err(code: int, message: str = "") -> Err:
    return Err(code, message)


def new_error_response(response: Any, err: Err) -> ErrorResponse:
    return ErrorResponse(response, err)


__all__ = ["Err", "ErrorResponse", "new_err", "new_error_response"]
