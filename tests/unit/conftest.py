import httpx
import pytest


@pytest.fixture
def response_factory():
    def _factory(status_code, url="https://api.example.com/x", method="GET", text="", json=None):
        request = httpx.Request(method, url)
        if json is not None:
            return httpx.Response(status_code, json=json, request=request)
        return httpx.Response(status_code, text=text, request=request)

    return _factory


@pytest.fixture
def requests_response_factory():
    requests = pytest.importorskip("requests")

    def _factory(status_code, url="https://api.example.com/x", method="GET", text=""):
        response = requests.Response()
        response.status_code = status_code
        response._content = text.encode("utf-8")
        response.encoding = "utf-8"
        response.request = requests.Request(method, url).prepare()
        response.url = response.request.url
        return response

    return _factory
