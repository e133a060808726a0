"""Clientes de recursos de la API de Octopus Deploy.

Por qué un paquete:
- Un módulo por recurso REST (releases, proyectos, entornos, deployments).
- Todos comparten el mismo transporte (`core.interfaces.web_client.WebClient`).
"""

from adapters.octopus_api.client import OctopusApi
from adapters.octopus_api.deployments import DeploymentsApi
from adapters.octopus_api.environments import EnvironmentsApi
from adapters.octopus_api.projects import ProjectsApi
from adapters.octopus_api.releases import ReleasesApi

__all__ = [
	"DeploymentsApi",
	"EnvironmentsApi",
	"OctopusApi",
	"ProjectsApi",
	"ReleasesApi",
]
