"""Contrato del transporte HTTP autenticado.

Por qué Protocol:
- Los clientes de recursos (`ReleasesApi`, ...) solo necesitan `get`/`post`.
- Permite sustituir el cliente httpx por un stub en tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@dataclass(frozen=True)
class WebResponse:
    """Respuesta cruda: código HTTP y cuerpo sin parsear.

    Valor transitorio; lo consume inmediatamente el cliente de recursos.
    """

    status_code: int
    content: str

    @property
    def is_error_code(self) -> bool:
        return not 200 <= self.status_code < 400


@runtime_checkable
class WebClient(Protocol):
    """Contrato mínimo del transporte.

    Reglas de diseño:
    - Un código HTTP de error NO lanza: se marca en `WebResponse.is_error_code`.
    - Un fallo de red sí lanza (`OSError`).
    """

    def get(self, resource: str) -> WebResponse:
        ...

    def post(self, resource: str, payload: dict[str, Any]) -> WebResponse:
        ...
