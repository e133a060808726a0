"""Wrapper de httpx para la API de Octopus.

Por qué un wrapper:
- Estandariza timeouts, headers (API key, User-Agent) y logging.
- Traduce fallos de red a `OSError` y deja los códigos HTTP de error como un
  flag en `WebResponse`, para que cada cliente decida si es fatal.
- Facilita testeo: se puede inyectar un `httpx.Client` con `MockTransport`.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from core.config import OctopusSettings
from core.errors import OctopusConnectionError
from core.interfaces.web_client import WebResponse

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-Octopus-ApiKey"


def build_client(
    settings: OctopusSettings,
    *,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` apuntando a `<host>/api/`.

    Por qué un builder:
    - Centraliza timeouts/headers para que todos los recursos se comporten igual.
    - `transport` permite tests sin red.
    """

    host, api_key = settings.require_connection()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
        API_KEY_HEADER: api_key,
    }
    return httpx.Client(
        base_url=f"{host}/api/",
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


class AuthenticatedWebClient:
    """Cliente HTTP autenticado con la API key de Octopus.

    Sin estado entre llamadas más allá de host/key fijos.
    """

    def __init__(self, client: httpx.Client) -> None:
        self._client = client

    @classmethod
    def from_settings(
        cls,
        settings: OctopusSettings,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> "AuthenticatedWebClient":
        return cls(build_client(settings, transport=transport))

    def get(self, resource: str) -> WebResponse:
        return self._send("GET", resource)

    def post(self, resource: str, payload: dict[str, Any]) -> WebResponse:
        return self._send("POST", resource, json=payload)

    def _send(self, method: str, resource: str, **kwargs: Any) -> WebResponse:
        # El path lo construye el llamador y no se escapa.
        try:
            response = self._client.request(method, resource.lstrip("/"), **kwargs)
        except httpx.RequestError as exc:
            # Incluye fallos de red, bucles de redirección y cuerpos no decodificables.
            logger.debug("%s %s failed: %s", method, resource, exc)
            raise OctopusConnectionError(f"{method} {resource} failed: {exc}") from exc

        logger.debug("%s %s -> HTTP %s", method, resource, response.status_code)
        return WebResponse(status_code=response.status_code, content=response.text)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "AuthenticatedWebClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
