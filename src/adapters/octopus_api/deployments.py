"""Recurso: deployments.

`POST deployments` crea un deployment de una release en un entorno. El cuerpo
de la respuesta se devuelve crudo para registrarlo tal cual.
"""

from __future__ import annotations

from core.interfaces.web_client import WebClient
from adapters.octopus_api.parsing import ensure_success


class DeploymentsApi:
    def __init__(self, web_client: WebClient) -> None:
        self._web_client = web_client

    def execute_deployment(self, release_id: str, environment_id: str) -> str:
        payload = {
            "EnvironmentId": environment_id,
            "ReleaseId": release_id,
        }
        response = ensure_success(self._web_client.post("deployments", payload))
        return response.content
