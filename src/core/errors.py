"""Errores del dominio.

Dos familias:
- Fallos de transporte/HTTP (`OSError`): respuesta con código de error o
  fallo de red. Llevan el código y el cuerpo crudo cuando existen.
- Fallos de datos/config (`ValueError`): respuesta que no cumple el esquema
  esperado o configuración incompleta.
"""

from __future__ import annotations


class OctopusError(Exception):
    """Base de todos los errores del cliente."""


class OctopusApiError(OctopusError, OSError):
    """El servidor respondió con un código fuera de 2xx/3xx."""

    def __init__(self, status_code: int, content: str) -> None:
        self.status_code = status_code
        self.content = content
        super().__init__(f"Code {status_code} - \n{content}")

    def __str__(self) -> str:
        return f"Code {self.status_code} - \n{self.content}"


class OctopusConnectionError(OctopusError, OSError):
    """Fallo de red (DNS, conexión rechazada, timeout)."""


class MalformedResponseError(OctopusError, ValueError):
    """El cuerpo no es JSON o no encaja con el registro esperado."""


class ConfigurationError(OctopusError, ValueError):
    """Falta host o API key."""
