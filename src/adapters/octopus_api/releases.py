"""Recurso: releases de un proyecto.

Endpoints:
- `GET projects/{id}/releases` (colección con `Items`)
- `GET projects/{id}/releases/{version}` (una release)
"""

from __future__ import annotations

from core.domain.models import Release
from core.interfaces.web_client import WebClient
from adapters.octopus_api.parsing import (
    ensure_success,
    parse_items,
    parse_json,
    parse_model,
    portal_url,
)


class ReleasesApi:
    def __init__(self, web_client: WebClient) -> None:
        self._web_client = web_client

    def get_releases_for_project(self, project_id: str) -> set[Release]:
        """Todas las releases de un proyecto.

        Raises:
            OctopusApiError: respuesta con código de error (incluye código y cuerpo).
            MalformedResponseError: algún item no tiene la forma de una release.
        """

        response = ensure_success(self._web_client.get(f"projects/{project_id}/releases"))
        releases: set[Release] = set()
        for item in parse_items(response):
            # La release pertenece al proyecto consultado.
            releases.add(parse_model(Release, {**item, "ProjectId": project_id}))
        return releases

    def get_portal_url_for_release(self, project_id: str, release_version: str) -> str:
        """URL parcial del portal para una versión concreta."""

        response = ensure_success(
            self._web_client.get(f"projects/{project_id}/releases/{release_version}")
        )
        return portal_url(parse_json(response))

    def get_portal_url_for_latest_release(self, project_id: str) -> str | None:
        """URL parcial del portal para la última release, o `None` si no hay releases.

        El servidor devuelve la colección de más reciente a más antigua; se
        toma el primer item sin reordenar.
        """

        response = ensure_success(self._web_client.get(f"projects/{project_id}/releases"))
        items = parse_items(response)
        if not items:
            return None
        return portal_url(items[0])
