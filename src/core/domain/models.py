"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- La respuesta JSON del servidor se valida contra una forma fija; si falta un
  campo obligatorio no se construye un registro parcial.
- Los aliases PascalCase (`Id`, `Version`, ...) documentan el contrato del
  wire sin filtrarlo al resto del código.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

_RECORD_CONFIG = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class ResourceLinks(BaseModel):
    """Objeto `Links` que el servidor adjunta a cada recurso."""

    model_config = _RECORD_CONFIG

    web: str = Field(
        ...,
        alias="Web",
        description="URL parcial del recurso en el portal de Octopus.",
    )


class LinkedResource(BaseModel):
    """Cualquier recurso del que solo nos interesa el link al portal."""

    model_config = _RECORD_CONFIG

    links: ResourceLinks = Field(..., alias="Links")


class Release(BaseModel):
    """Una release de un proyecto.

    La identidad es el `id` (único en el servidor); las búsquedas de negocio
    se hacen por `version`.
    """

    model_config = _RECORD_CONFIG

    id: str = Field(..., alias="Id", min_length=1)
    project_id: str = Field(..., alias="ProjectId", min_length=1)
    channel_id: str = Field(..., alias="ChannelId")
    release_notes: str | None = Field(default=None, alias="ReleaseNotes")
    version: str = Field(..., alias="Version")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Release):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


class Project(BaseModel):
    model_config = _RECORD_CONFIG

    id: str = Field(..., alias="Id", min_length=1)
    name: str = Field(..., alias="Name")


class Environment(BaseModel):
    model_config = _RECORD_CONFIG

    id: str = Field(..., alias="Id", min_length=1)
    name: str = Field(..., alias="Name")


class SelectedPackage(BaseModel):
    """Par paso/versión de paquete para una petición de deployment."""

    model_config = _RECORD_CONFIG

    step_name: str = Field(..., alias="StepName")
    version: str = Field(..., alias="Version")


ItemT = TypeVar("ItemT")


class ResourceCollection(BaseModel, Generic[ItemT]):
    """Colección paginada: un objeto con el array `Items`."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    items: list[ItemT] = Field(..., alias="Items")
