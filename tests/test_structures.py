from __future__ import annotations

import httpx
import pytest

from apicodes.structures import Response, new_response


def test_response_delegates_to_wrapped_response():
    raw = httpx.Response(200, text="ok", request=httpx.Request("GET", "http://test.local/"))

    result = new_response(raw)

    assert isinstance(result, Response)
    assert result.raw is raw
    assert result.status_code == 200
    assert result.text == "ok"
    assert result.request.method == "GET"


def test_response_missing_attribute_raises_attribute_error():
    result = Response(httpx.Response(204))

    with pytest.raises(AttributeError):
        result.not_an_attribute  # noqa: B018


def test_response_requires_a_response():
    with pytest.raises(TypeError, match="response must not be None"):
        Response(None)
