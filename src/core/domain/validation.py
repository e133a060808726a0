"""Resultados de validación de entradas de deployment.

La capa de presentación solo necesita tres niveles (ok/warning/error) y un
mensaje; el camino de deploy, en cambio, devuelve un booleano.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(str, Enum):
    """Severity levels for a validation check, ordered from best to worst."""

    OK = "ok"
    WARNING = "warning"
    ERROR = "error"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @classmethod
    def worst(cls, severities: list["Severity"]) -> "Severity":
        """Return the most severe value (`OK` for an empty list)."""

        return max(severities, key=lambda s: s.rank, default=cls.OK)


_RANKS = {Severity.OK: 0, Severity.WARNING: 1, Severity.ERROR: 2}


@dataclass(frozen=True)
class ValidationResult:
    severity: Severity
    message: str = ""

    @classmethod
    def ok(cls, message: str = "") -> "ValidationResult":
        return cls(Severity.OK, message)

    @classmethod
    def warning(cls, message: str) -> "ValidationResult":
        return cls(Severity.WARNING, message)

    @classmethod
    def error(cls, message: str) -> "ValidationResult":
        return cls(Severity.ERROR, message)

    @property
    def is_ok(self) -> bool:
        return self.severity is Severity.OK
