"""Shared fixtures: settings and a fake nutrition backend."""

import httpx
import pytest

from nutricache.config import Settings

BACKEND = "http://backend.test"


class FakeBackend:
    """Records requests and answers from a path -> (status, body) table."""

    def __init__(self):
        self.routes: dict[tuple[str, str], tuple[int, object]] = {}
        self.requests: list[httpx.Request] = []

    def add(self, method: str, path: str, status: int, body: object) -> None:
        self.routes[(method, path)] = (status, body)

    def calls(self, method: str, path: str) -> int:
        return sum(1 for r in self.requests if r.method == method and r.url.path == path)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status, body = self.routes.get((request.method, request.url.path), (404, {"detail": "Not Found"}))
        return httpx.Response(status, json=body)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def settings():
    return Settings(
        api_base_url=BACKEND,
        api_version="v1",
        api_token="secret-token",
        cache_ttl=300,
        profile_cache_ttl=300,
        preferences_cache_ttl=120,
    )


@pytest.fixture
def backend():
    return FakeBackend()


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()
