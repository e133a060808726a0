"""Recurso: entornos."""

from __future__ import annotations

from core.domain.models import Environment
from core.interfaces.web_client import WebClient
from adapters.octopus_api.parsing import ensure_success, parse_array
from adapters.octopus_api.lookup import find_by_name


class EnvironmentsApi:
    def __init__(self, web_client: WebClient) -> None:
        self._web_client = web_client

    def get_all(self) -> set[Environment]:
        response = ensure_success(self._web_client.get("environments/all"))
        return set(parse_array(response, Environment))

    def get_by_name(self, name: str, ignore_case: bool = False) -> Environment | None:
        """Igual que `ProjectsApi.get_by_name`, para entornos."""

        return find_by_name(self.get_all(), name, ignore_case=ignore_case)
