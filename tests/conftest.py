from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator

import httpx
import pytest

from adapters.octopus_api import OctopusApi
from core.config import OctopusSettings

HOST = "https://octopus.test"


@dataclass
class FakeOctopus:
    """Routes `(method, path)` to canned responses and records every request."""

    routes: dict[tuple[str, str], httpx.Response | Callable[[httpx.Request], httpx.Response]] = field(
        default_factory=dict
    )
    requests: list[httpx.Request] = field(default_factory=list)

    def add(self, method: str, path: str, *, status: int = 200, body: Any = None, text: str | None = None) -> None:
        if text is None:
            text = json.dumps(body if body is not None else {})
        self.routes[(method, path)] = httpx.Response(status, text=text)

    def fail(self, method: str, path: str, exc: Exception) -> None:
        def _raise(request: httpx.Request) -> httpx.Response:
            raise exc

        self.routes[(method, path)] = _raise

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, text=f"no route for {request.method} {request.url.path}")
        if callable(route):
            return route(request)
        return route

    def paths(self, method: str | None = None) -> list[str]:
        return [r.url.path for r in self.requests if method is None or r.method == method]


@pytest.fixture
def settings() -> OctopusSettings:
    return OctopusSettings(
        _env_file=None,
        octopus_host=HOST,
        api_key="API-TESTKEY",
        http_timeout_seconds=5,
    )


@pytest.fixture
def fake_octopus() -> FakeOctopus:
    return FakeOctopus()


@pytest.fixture
def api(settings: OctopusSettings, fake_octopus: FakeOctopus) -> Iterator[OctopusApi]:
    client = OctopusApi.from_settings(settings, transport=httpx.MockTransport(fake_octopus.handler))
    yield client
    client.close()


def release_item(release_id: str, version: str, *, channel: str = "Channels-1", notes: str | None = None) -> dict[str, Any]:
    return {
        "Id": release_id,
        "Version": version,
        "ChannelId": channel,
        "ReleaseNotes": notes,
        "ProjectId": "ignored",
        "Links": {"Web": f"/app#/releases/{release_id}"},
    }
