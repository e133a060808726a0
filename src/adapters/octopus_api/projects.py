"""Recurso: proyectos."""

from __future__ import annotations

from core.domain.models import Project
from core.interfaces.web_client import WebClient
from adapters.octopus_api.parsing import ensure_success, parse_array
from adapters.octopus_api.lookup import find_by_name


class ProjectsApi:
    def __init__(self, web_client: WebClient) -> None:
        self._web_client = web_client

    def get_all(self) -> set[Project]:
        response = ensure_success(self._web_client.get("projects/all"))
        return set(parse_array(response, Project))

    def get_by_name(self, name: str, ignore_case: bool = False) -> Project | None:
        """Busca un proyecto por nombre.

        Con `ignore_case=True` acepta diferencias de mayúsculas pero devuelve el
        registro con el nombre canónico del servidor, para que el llamador
        pueda avisar del desajuste.
        """

        return find_by_name(self.get_all(), name, ignore_case=ignore_case)
