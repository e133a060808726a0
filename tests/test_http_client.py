from __future__ import annotations

import json

import httpx
import pytest

from adapters.http_client import API_KEY_HEADER, AuthenticatedWebClient
from core.config import OctopusSettings
from core.errors import ConfigurationError, OctopusConnectionError
from core.interfaces.web_client import WebClient, WebResponse


def _client(settings: OctopusSettings, handler) -> AuthenticatedWebClient:
    return AuthenticatedWebClient.from_settings(settings, transport=httpx.MockTransport(handler))


def test_get_prefixes_api_path_and_sends_key(settings: OctopusSettings) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, text='{"ok": true}')

    with _client(settings, handler) as client:
        response = client.get("projects/Projects-1/releases")

    assert isinstance(client, WebClient)
    assert response == WebResponse(status_code=200, content='{"ok": true}')
    assert str(seen[0].url) == "https://octopus.test/api/projects/Projects-1/releases"
    assert seen[0].headers[API_KEY_HEADER] == "API-TESTKEY"


def test_post_sends_json_body(settings: OctopusSettings) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(201, text="created")

    with _client(settings, handler) as client:
        response = client.post("deployments", {"ReleaseId": "Releases-9"})

    assert response.status_code == 201
    assert not response.is_error_code
    assert seen[0].method == "POST"
    assert json.loads(seen[0].content) == {"ReleaseId": "Releases-9"}


@pytest.mark.parametrize("status", [400, 401, 404, 500, 503])
def test_error_status_is_flagged_not_raised(settings: OctopusSettings, status: int) -> None:
    with _client(settings, lambda request: httpx.Response(status, text="nope")) as client:
        response = client.get("projects/all")

    assert response.is_error_code
    assert response.status_code == status
    assert response.content == "nope"


def test_redirect_status_is_not_an_error() -> None:
    assert not WebResponse(status_code=304, content="").is_error_code
    assert WebResponse(status_code=199, content="").is_error_code


def test_network_failure_raises_os_error(settings: OctopusSettings) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with _client(settings, handler) as client:
        with pytest.raises(OctopusConnectionError) as excinfo:
            client.get("projects/all")

    assert isinstance(excinfo.value, OSError)
    assert "connection refused" in str(excinfo.value)


def test_missing_configuration_is_rejected() -> None:
    settings = OctopusSettings(_env_file=None, octopus_host=None, api_key=None)
    with pytest.raises(ConfigurationError):
        AuthenticatedWebClient.from_settings(settings)


def test_redirect_loop_raises_os_error(settings: OctopusSettings) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(302, headers={"Location": str(request.url)})

    with _client(settings, handler) as client:
        with pytest.raises(OctopusConnectionError) as excinfo:
            client.get("projects/all")

    assert isinstance(excinfo.value, OSError)
    assert isinstance(excinfo.value.__cause__, httpx.TooManyRedirects)


def test_undecodable_body_raises_os_error(settings: OctopusSettings) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, headers={"Content-Encoding": "gzip"}, content=b"not gzip at all")

    with _client(settings, handler) as client:
        with pytest.raises(OctopusConnectionError) as excinfo:
            client.get("projects/all")

    assert isinstance(excinfo.value.__cause__, httpx.DecodingError)
