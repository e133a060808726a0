"""Fachada sobre los clientes de recursos.

Por qué una fachada:
- El orquestador y la CLI necesitan un único objeto con un único transporte.
- Se construye desde `OctopusSettings` explícitos (sin singleton global).
"""

from __future__ import annotations

from typing import Any

import httpx

from adapters.http_client import AuthenticatedWebClient
from core.config import OctopusSettings
from core.domain.models import Environment, Project, Release
from core.interfaces.web_client import WebClient
from adapters.octopus_api.deployments import DeploymentsApi
from adapters.octopus_api.environments import EnvironmentsApi
from adapters.octopus_api.projects import ProjectsApi
from adapters.octopus_api.releases import ReleasesApi


class OctopusApi:
    def __init__(self, web_client: WebClient) -> None:
        self._web_client = web_client
        self.releases = ReleasesApi(web_client)
        self.projects = ProjectsApi(web_client)
        self.environments = EnvironmentsApi(web_client)
        self.deployments = DeploymentsApi(web_client)

    @classmethod
    def from_settings(
        cls,
        settings: OctopusSettings,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> "OctopusApi":
        return cls(AuthenticatedWebClient.from_settings(settings, transport=transport))

    def get_project_by_name(self, name: str, ignore_case: bool = False) -> Project | None:
        return self.projects.get_by_name(name, ignore_case=ignore_case)

    def get_environment_by_name(self, name: str, ignore_case: bool = False) -> Environment | None:
        return self.environments.get_by_name(name, ignore_case=ignore_case)

    def get_releases_for_project(self, project_id: str) -> set[Release]:
        return self.releases.get_releases_for_project(project_id)

    def execute_deployment(self, release_id: str, environment_id: str) -> str:
        return self.deployments.execute_deployment(release_id, environment_id)

    def close(self) -> None:
        close = getattr(self._web_client, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> "OctopusApi":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
