from __future__ import annotations

from typing import Any


class Response:
    """Wrapper around an httpx or requests response.

    Attribute access falls through to the wrapped object. The response is
    borrowed: it is never closed or modified here.
    """

    def __init__(self, response: Any) -> None:
        if response is None:
            raise TypeError("response must not be None")
        self._response = response

    @property
    def raw(self) -> Any:
        return self._response

    def __getattr__(self, name: str) -> Any:
        if name.startswith("__") or name == "_response":
            raise AttributeError(name)
        return getattr(self._response, name)

    def __repr__(self) -> str:
        return f"Response({self._response!r})"


def new_response(response: Any) -> Response:
    return Response(response)


__all__ = ["Response", "new_response"]
