"""Deployment orchestration for a single release.

Given the three free-text inputs a CI job provides (project, release version,
environment) the recorder resolves names to ids, picks the release with the
exact version and asks the server to deploy it. Every failure is terminal and
reported through a `DeploymentLog`; the overall outcome is a single boolean.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from adapters.octopus_api import OctopusApi
from core.domain.models import Environment, Project, Release
from core.interfaces.deployment_log import DeploymentLog

_RULE = "======================"


@dataclass(frozen=True)
class DeploymentRequest:
    """What to deploy and where. Inputs are trimmed on construction."""

    project: str
    release_version: str
    environment: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "project", self.project.strip())
        object.__setattr__(self, "release_version", self.release_version.strip())
        object.__setattr__(self, "environment", self.environment.strip())


class LoggingDeploymentLog:
    """`DeploymentLog` backed by a standard `logging.Logger`."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(__name__)

    def info(self, message: str) -> None:
        self._logger.info(message)

    def fatal(self, message: str) -> None:
        self._logger.error(message)


def case_mismatch_message(title: str, server_name: str) -> str:
    return f"{title} name case does not match. Did you mean '{server_name}'?"


def find_release(releases: set[Release], version: str) -> Release | None:
    """First release whose version equals `version` exactly (case-sensitive)."""

    for release in releases:
        if release.version == version:
            return release
    return None


class DeploymentRecorder:
    def __init__(self, api: OctopusApi, log: DeploymentLog | None = None) -> None:
        self._api = api
        self._log = log or LoggingDeploymentLog()

    def perform(self, request: DeploymentRequest) -> bool:
        """Run the deployment. Returns True only if the server accepted it."""

        log = self._log
        success = True
        log.info("Started Octopus Deploy")
        log.info(_RULE)
        log.info(f"Project: {request.project}")
        log.info(f"Version: {request.release_version}")
        log.info(f"Environment: {request.environment}")
        log.info(_RULE)

        project: Project | None = None
        try:
            project = self._api.get_project_by_name(request.project, ignore_case=True)
        except (OSError, ValueError) as exc:
            log.fatal(
                f"Retrieving project name '{request.project}' failed with message '{exc}'"
            )
            success = False

        environment: Environment | None = None
        try:
            environment = self._api.get_environment_by_name(request.environment, ignore_case=True)
        except (OSError, ValueError) as exc:
            log.fatal(
                f"Retrieving environment name '{request.environment}' failed with message '{exc}'"
            )
            success = False

        if project is None:
            log.fatal("Project was not found.")
            success = False
        if environment is None:
            log.fatal("Environment was not found.")
            success = False
        if not success or project is None or environment is None:
            return False

        if project.name != request.project:
            log.info(case_mismatch_message("Project", project.name))
        if environment.name != request.environment:
            log.info(case_mismatch_message("Environment", environment.name))

        releases: set[Release] | None = None
        try:
            releases = self._api.get_releases_for_project(project.id)
        except (OSError, ValueError) as exc:
            log.fatal(
                f"Retrieving releases for project '{request.project}' failed with message '{exc}'"
            )
        if releases is None:
            log.fatal("Releases was not found.")
            return False

        release = find_release(releases, request.release_version)
        if release is None:
            log.fatal(
                f"Unable to find release version {request.release_version} "
                f"for project {request.project}"
            )
            return False

        try:
            results = self._api.execute_deployment(release.id, environment.id)
        except OSError as exc:
            log.fatal(f"Failed to deploy: {exc}")
            return False

        log.info(results)
        return True
