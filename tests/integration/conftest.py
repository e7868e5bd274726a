"""Shared fixtures: a real Client whose transport is an in-process fake API.

Only the HTTP transport is replaced (httpx.MockTransport); URL building,
headers, body encoding and decoding all run for real.
"""

import json

import httpx
import pytest

from github_binding.client import Client

BASE_URL = "https://api.github.test/"


class FakeAPI:
    """Routes (method, path) to canned responses and records every request."""

    def __init__(self):
        self.routes = {}
        self.requests: list[httpx.Request] = []

    def add(self, method, path, body=None, status=200, headers=None, raw=None):
        if raw is None and body is not None:
            raw = json.dumps(body)
        self.routes[(method, path)] = (status, raw or "", headers or {})

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, request.url.path)
        if key not in self.routes:
            return httpx.Response(404, json={"message": "Not Found"})
        status, raw, headers = self.routes[key]
        return httpx.Response(status, content=raw.encode(), headers=headers)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


@pytest.fixture
def api():
    return FakeAPI()


@pytest.fixture
def client(api):
    http = httpx.Client(transport=httpx.MockTransport(api.handler))
    c = Client(token="test-token", base_url=BASE_URL, http_client=http)
    yield c
    http.close()
