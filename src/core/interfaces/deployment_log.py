"""Sink de logs del orquestador de deployments."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class DeploymentLog(Protocol):
    """Destino de las líneas que ve el usuario durante un deployment.

    `fatal` marca un motivo terminal; el orquestador decide cuándo parar.
    """

    def info(self, message: str) -> None:
        ...

    def fatal(self, message: str) -> None:
        ...
