"""Shared fixtures: an in-memory registry behind a fake requests session."""

import json
import threading

import pytest
import requests

from orgsize.models import RegistryConfig

REGISTRY = "https://registry.test"


def make_response(url, status_code=200, body=None, raw=None, headers=None):
    """Build a real requests.Response without touching the network."""
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response.encoding = "utf-8"
    response.headers.update(headers or {})
    if raw is not None:
        response._content = raw
    else:
        response._content = json.dumps(body).encode("utf-8")
    return response


class FakeSession:
    """Minimal stand-in for requests.Session keyed by URL."""

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []
        self.headers = {}
        self.closed = False
        self._lock = threading.Lock()

    def add_json(self, url, body, status_code=200):
        self.routes[url] = make_response(url, status_code, body=body)

    def add_status(self, url, status_code, headers=None):
        self.routes[url] = make_response(url, status_code, body={"error": "x"}, headers=headers)

    def add_raw(self, url, raw):
        self.routes[url] = make_response(url, 200, raw=raw)

    def add_exception(self, url, exc):
        self.routes[url] = exc

    def get(self, url, timeout=None, **kwargs):
        with self._lock:
            self.calls.append(url)
        route = self.routes.get(url)
        if route is None:
            return make_response(url, 404, body={"error": "Not found"})
        if isinstance(route, Exception):
            raise route
        return route

    def close(self):
        self.closed = True


def packument(version="1.0.0", size=None, **extra):
    """Registry package document with an optional unpackedSize."""
    dist = {"tarball": "https://example.invalid/pkg.tgz"}
    if size is not None:
        dist["unpackedSize"] = size
    document = {
        "dist-tags": {"latest": version},
        "versions": {version: {"dist": dist}},
    }
    document.update(extra)
    return document


@pytest.fixture
def registry_config():
    return RegistryConfig(token="secret-token", registry_url=REGISTRY + "/", concurrency=4)


@pytest.fixture
def fake_session():
    return FakeSession()
