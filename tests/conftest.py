"""Pytest configuration and shared fixtures."""

import json

import httpx
import pytest

from moyn.core.config import ConfigStore
from moyn.core.models import Session

API_URL = "https://moyn.test"


class StubServer:
    """In-process stand-in for the moyn API, served through httpx.MockTransport."""

    def __init__(self):
        self.routes = {}
        self.requests = []

    def add(self, method, path, status=200, json=None, text=None):
        self.routes[(method, path)] = (status, json, text)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        raw_path = request.url.raw_path.decode("ascii").split("?", 1)[0]
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            route = self.routes.get((request.method, raw_path))
        if route is None:
            return httpx.Response(404, json={"error": "no such route"})
        status, body, text = route
        if text is not None:
            return httpx.Response(status, text=text)
        if body is None:
            return httpx.Response(status)
        return httpx.Response(status, json=body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> dict:
        return json.loads(self.last_request.content)


@pytest.fixture
def server():
    """Empty stub server; tests register the routes they need."""
    return StubServer()


@pytest.fixture
def session():
    return Session(api_token="moyn_testtoken", api_url=API_URL)


@pytest.fixture
def config_path(tmp_path, monkeypatch):
    """Point the session file at a temp dir and clear other MOYN_* settings."""
    path = tmp_path / "moyn" / "config.json"
    monkeypatch.setenv("MOYN_CONFIG_PATH", str(path))
    monkeypatch.delenv("MOYN_TOKEN", raising=False)
    monkeypatch.delenv("MOYN_API_URL", raising=False)
    monkeypatch.delenv("MOYN_TIMEOUT", raising=False)
    return path


@pytest.fixture
def logged_in(config_path, session):
    """A saved session, as left behind by `moyn login`."""
    ConfigStore(config_path).save(session)
    return session


@pytest.fixture
def sample_posts():
    return [
        {"id": 1, "title": "Hello world", "slug": "hello-world", "url": f"{API_URL}/p/hello-world"},
        {"id": 2, "title": "Second post", "slug": "second-post", "url": f"{API_URL}/p/second-post"},
    ]


@pytest.fixture
def sample_space():
    return {
        "slug": "dev-notes",
        "name": "Dev Notes",
        "description": "Things I learned",
        "visibility": "unlisted",
        "url": f"{API_URL}/s/dev-notes",
        "access_token": "sp_abc123",
        "token_url": f"{API_URL}/s/dev-notes?token=sp_abc123",
    }
